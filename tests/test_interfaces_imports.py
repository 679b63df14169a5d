def test_can_import_all_protocols():
    # Import must succeed and expose the expected names
    import git_ignore.core.interfaces as I

    assert hasattr(I, "DirEntryProtocol")
    assert hasattr(I, "DirectoryScannerProtocol")
    assert hasattr(I, "HTTPTransportProtocol")
    assert hasattr(I, "LoggerFactoryProtocol")
    assert hasattr(I, "LoggerLikeProtocol")
    assert hasattr(I, "TemplateCacheProtocol")
    assert hasattr(I, "UserConfigStoreProtocol")


def test_concrete_types_satisfy_protocols(tmp_path):
    from git_ignore.core.interfaces import (
        DirEntryProtocol,
        HTTPTransportProtocol,
        TemplateCacheProtocol,
        UserConfigStoreProtocol,
    )
    from git_ignore.core.models import DirEntry
    from git_ignore.io import TemplateCache, UserConfigStore
    from git_ignore.net import UrllibHTTPTransport
    from git_ignore.utils.paths import ProjectPaths

    paths = ProjectPaths.under(tmp_path)
    assert isinstance(TemplateCache(paths), TemplateCacheProtocol)
    assert isinstance(UserConfigStore(paths), UserConfigStoreProtocol)
    assert isinstance(UrllibHTTPTransport(), HTTPTransportProtocol)
    assert isinstance(DirEntry.file("a.txt"), DirEntryProtocol)
