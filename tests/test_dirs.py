import pytest

from hostkit.fs.dirs import (
    MissingEnvironmentError,
    UnsupportedPlatformError,
    get_os_app_install_dir,
    get_os_desktop_dir,
    get_os_dir,
    get_os_dirs,
    get_os_shared_data_dir,
    get_os_sys_conf_dir,
    get_os_user_bin_dir,
    get_os_user_home_dir,
    get_os_usr_conf_dir,
)
from hostkit.models import DirCategory, DirContext

LINUX = DirContext(platform="linux", env={"HOME": "/home/ada"})
DARWIN = DirContext(platform="darwin", env={"HOME": "/Users/ada"})
WIN32 = DirContext(
    platform="win32",
    env={
        "USERPROFILE": "C:\\Users\\ada",
        "APPDATA": "C:\\Users\\ada\\AppData\\Roaming",
        "LOCALAPPDATA": "C:\\Users\\ada\\AppData\\Local",
    },
)

ALL_LOOKUPS = [
    get_os_app_install_dir,
    get_os_shared_data_dir,
    get_os_sys_conf_dir,
    get_os_usr_conf_dir,
    get_os_user_home_dir,
    get_os_user_bin_dir,
    get_os_desktop_dir,
]


def test_linux_directories():
    assert get_os_app_install_dir(LINUX) == "/opt"
    assert get_os_shared_data_dir(LINUX) == "/usr/share"
    assert get_os_sys_conf_dir(LINUX) == "/etc"
    assert get_os_usr_conf_dir(LINUX) == "/home/ada/.config"
    assert get_os_user_home_dir(LINUX) == "/home/ada"
    assert get_os_user_bin_dir(LINUX) == "/home/ada/.local/bin"
    assert get_os_desktop_dir(LINUX) == "/home/ada/Desktop"


def test_darwin_directories():
    assert get_os_app_install_dir(DARWIN) == "/Applications"
    assert get_os_shared_data_dir(DARWIN) == "/Users/ada/Library/Application Support"
    assert get_os_sys_conf_dir(DARWIN) == "/Library/Application Support"
    assert get_os_usr_conf_dir(DARWIN) == "/Users/ada/.config"
    assert get_os_user_bin_dir(DARWIN) == "/Users/ada/bin"


def test_win32_directories():
    assert get_os_app_install_dir(WIN32) == "C:\\Program Files"
    assert get_os_shared_data_dir(WIN32) == "C:\\Users\\ada\\AppData\\Roaming"
    assert get_os_sys_conf_dir(WIN32) == "C:\\Users\\ada\\AppData\\Roaming"
    assert get_os_usr_conf_dir(WIN32) == "C:\\Users\\ada\\AppData\\Local"
    assert get_os_user_home_dir(WIN32) == "C:\\Users\\ada"
    assert get_os_user_bin_dir(WIN32) == "C:\\Program Files"
    assert get_os_desktop_dir(WIN32) == "C:\\Users\\ada\\Desktop"


@pytest.mark.parametrize("lookup", ALL_LOOKUPS)
def test_unsupported_platform_fails(lookup):
    ctx = DirContext(platform="sunos5", env={"HOME": "/home/ada"})
    with pytest.raises(UnsupportedPlatformError):
        lookup(ctx)


def test_missing_environment_variable_is_an_error():
    with pytest.raises(MissingEnvironmentError):
        get_os_user_home_dir(DirContext(platform="linux", env={}))


def test_category_dispatch_matches_functions():
    assert get_os_dir(DirCategory.USER_BIN, LINUX) == get_os_user_bin_dir(LINUX)
    assert get_os_dir("desktop", WIN32) == get_os_desktop_dir(WIN32)
    assert set(get_os_dirs(LINUX)) == {category.value for category in DirCategory}


def test_default_context_reads_process(monkeypatch):
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("HOME", "/tmp/someone")
    assert get_os_user_home_dir() == "/tmp/someone"
