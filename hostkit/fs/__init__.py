"""Filesystem, path and standard-directory helpers."""

from .dirs import (
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
from .files import (
    append,
    copy_file_recursive,
    deserialize_object_sync,
    ensure_directory,
    exists,
    exists_sync,
    file_lines_sync,
    insert_between_placeholders_sync,
    merge_object_hooks,
    read_gzip_sync,
    read_json,
    read_json_sync,
    remove,
    remove_sync,
    serialize_object_sync,
    sha256,
    silent_remove,
    write,
    write_file_and_dir,
    write_gzip_sync,
    write_json,
    write_json_sync,
    write_sync,
)
from .paths import expand_tilde, is_path_syntax, is_tilde_notation, resolve

__all__ = [
    "MissingEnvironmentError",
    "UnsupportedPlatformError",
    "get_os_app_install_dir",
    "get_os_desktop_dir",
    "get_os_dir",
    "get_os_dirs",
    "get_os_shared_data_dir",
    "get_os_sys_conf_dir",
    "get_os_user_bin_dir",
    "get_os_user_home_dir",
    "get_os_usr_conf_dir",
    "append",
    "copy_file_recursive",
    "deserialize_object_sync",
    "ensure_directory",
    "exists",
    "exists_sync",
    "file_lines_sync",
    "insert_between_placeholders_sync",
    "merge_object_hooks",
    "read_gzip_sync",
    "read_json",
    "read_json_sync",
    "remove",
    "remove_sync",
    "serialize_object_sync",
    "sha256",
    "silent_remove",
    "write",
    "write_file_and_dir",
    "write_gzip_sync",
    "write_json",
    "write_json_sync",
    "write_sync",
    "expand_tilde",
    "is_path_syntax",
    "is_tilde_notation",
    "resolve",
]
