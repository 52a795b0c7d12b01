"""
Storage errors
"""


class StorageError(Exception):
    """The best score store could not be read or written"""
