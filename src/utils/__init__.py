"""
Utilities package - logging and timing helpers shared by all subsystems
"""

from .hybrid_logger import HybridLogger, ClassLogger, ColoredFormatter
from .once_in_ms import OnceInMs
from .scheduler import TimerScheduler

__all__ = [
    'HybridLogger',
    'ClassLogger',
    'ColoredFormatter',
    'OnceInMs',
    'TimerScheduler'
]
