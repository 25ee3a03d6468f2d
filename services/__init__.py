"""Service layer for OptionsGroup - settings group logic over injected collaborators."""

from .base_service import BaseService
from .options_group import OptionsGroup

__all__ = [
    'BaseService',
    'OptionsGroup',
]
