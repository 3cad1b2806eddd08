"""OS-conventional standard directories resolved per platform.

Every lookup takes an optional :class:`DirContext`; when omitted the current
process platform and environment are used.
"""

from __future__ import annotations

from typing import Callable, Dict, Optional

from ..models import DirCategory, DirContext, Platform


class UnsupportedPlatformError(RuntimeError):
    """Raised when a directory is requested for an unknown platform."""

    def __init__(self, platform: str) -> None:
        super().__init__(f"Unsupported OS: {platform}")
        self.platform = platform


class MissingEnvironmentError(KeyError):
    """Raised when a platform directory depends on an unset environment variable."""


def _context(ctx: Optional[DirContext]) -> DirContext:
    return ctx if ctx is not None else DirContext.current()


def _platform(ctx: DirContext) -> Platform:
    tag = ctx.platform_tag
    if tag is None:
        raise UnsupportedPlatformError(ctx.platform)
    return tag


def _env(ctx: DirContext, name: str) -> str:
    value = ctx.env.get(name)
    if not value:
        raise MissingEnvironmentError(f"{name} is not set")
    return value


def get_os_app_install_dir(ctx: Optional[DirContext] = None) -> str:
    """Directory where applications are installed system wide."""

    ctx = _context(ctx)
    platform = _platform(ctx)
    if platform is Platform.LINUX:
        return "/opt"
    if platform is Platform.DARWIN:
        return "/Applications"
    return "C:\\Program Files"


def get_os_shared_data_dir(ctx: Optional[DirContext] = None) -> str:
    """Architecture-independent (shared) data, e.g. ``/usr/share`` on Linux."""

    ctx = _context(ctx)
    platform = _platform(ctx)
    if platform is Platform.LINUX:
        return ctx.pathmod.join("/usr", "share")
    if platform is Platform.DARWIN:
        return ctx.pathmod.join(get_os_user_home_dir(ctx), "Library", "Application Support")
    return _env(ctx, "APPDATA")


def get_os_sys_conf_dir(ctx: Optional[DirContext] = None) -> str:
    """System wide directory for application configuration."""

    ctx = _context(ctx)
    platform = _platform(ctx)
    if platform is Platform.LINUX:
        return "/etc"
    if platform is Platform.DARWIN:
        return "/Library/Application Support"
    return _env(ctx, "APPDATA")


def get_os_usr_conf_dir(ctx: Optional[DirContext] = None) -> str:
    """User specific directory for application configuration."""

    ctx = _context(ctx)
    platform = _platform(ctx)
    if platform is Platform.WIN32:
        return _env(ctx, "LOCALAPPDATA")
    return ctx.pathmod.join(get_os_user_home_dir(ctx), ".config")


def get_os_user_home_dir(ctx: Optional[DirContext] = None) -> str:
    """Home directory of the current user, e.g. ``/home/<user>``."""

    ctx = _context(ctx)
    platform = _platform(ctx)
    if platform is Platform.WIN32:
        return _env(ctx, "USERPROFILE")
    return _env(ctx, "HOME")


def get_os_user_bin_dir(ctx: Optional[DirContext] = None) -> str:
    ctx = _context(ctx)
    platform = _platform(ctx)
    if platform is Platform.LINUX:
        return ctx.pathmod.join(get_os_user_home_dir(ctx), ".local", "bin")
    if platform is Platform.DARWIN:
        return ctx.pathmod.join(get_os_user_home_dir(ctx), "bin")
    return get_os_app_install_dir(ctx)


def get_os_desktop_dir(ctx: Optional[DirContext] = None) -> str:
    ctx = _context(ctx)
    return ctx.pathmod.join(get_os_user_home_dir(ctx), "Desktop")


_LOOKUPS: Dict[DirCategory, Callable[[Optional[DirContext]], str]] = {
    DirCategory.APP_INSTALL: get_os_app_install_dir,
    DirCategory.SHARED_DATA: get_os_shared_data_dir,
    DirCategory.SYSTEM_CONFIG: get_os_sys_conf_dir,
    DirCategory.USER_CONFIG: get_os_usr_conf_dir,
    DirCategory.USER_HOME: get_os_user_home_dir,
    DirCategory.USER_BIN: get_os_user_bin_dir,
    DirCategory.DESKTOP: get_os_desktop_dir,
}


def get_os_dir(category: DirCategory | str, ctx: Optional[DirContext] = None) -> str:
    """Resolves any :class:`DirCategory` for the given context."""

    return _LOOKUPS[DirCategory(category)](ctx)


def get_os_dirs(ctx: Optional[DirContext] = None) -> Dict[str, str]:
    """Resolves every category; used by the ``dirs`` command."""

    ctx = _context(ctx)
    return {category.value: lookup(ctx) for category, lookup in _LOOKUPS.items()}
