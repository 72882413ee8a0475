"""
Core 유틸리티 패키지
"""

from .logging_config import setup_logger, logger

__all__ = [
    'setup_logger',
    'logger'
]
