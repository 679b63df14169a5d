from .fs import DirEntryProtocol, DirectoryScannerProtocol
from .logging import LoggerFactoryProtocol, LoggerLikeProtocol
from .net import HTTPTransportProtocol
from .store import TemplateCacheProtocol, UserConfigStoreProtocol

__all__ = [
    'DirEntryProtocol',
    'DirectoryScannerProtocol',
    'LoggerFactoryProtocol',
    'LoggerLikeProtocol',
    'HTTPTransportProtocol',
    'TemplateCacheProtocol',
    'UserConfigStoreProtocol',
]
