"""Shared utilities used across services."""

from .file_utils import file_exists, try_read_file, must_read_file
from .yaml_utils import load_yaml, parse_yaml_scalar
from .logging_utils import (
    get_logger,
    get_nop_logger,
    LoggerConfig,
    RotationConfig,
    override_logger_config,
    override_rotation_config,
    build_logger,
)
from .argument_parsing import (
    add_boot_arguments,
    add_boot_config_path_argument,
    add_boot_config_override_argument,
)
from .strings import (
    rand_string,
    default_if_empty,
    get_username_from_basic_auth,
    get_password_from_basic_auth,
    extract_scheme_from_url,
)
from .environment import (
    get_env_value_or_default,
    get_locale,
    match_locale_with_env,
    get_local_ip,
    get_local_hostname,
)
from .request_ids import generate_request_id, generate_request_id_with_prefix
from .conversions import (
    convert_json_to_map,
    convert_struct_to_bytes,
    convert_struct_to_json,
    convert_struct_to_json_pretty,
    convert_struct_to_map,
    convert_struct_to_fields,
)
from .git_utils import (
    GitError,
    GitInfo,
    Commit,
    Committer,
    AppMeta,
    get_package_name,
    get_current_tag,
    get_remote_url,
    get_branch,
    get_latest_commit,
    get_git_info,
    read_app_meta,
)
from .resource_copier import (
    DEFAULT_FILE_MODE,
    resolve_resource,
    copy_resource_file,
    copy_resource_dir,
)

__all__ = [
    "file_exists",
    "try_read_file",
    "must_read_file",
    "load_yaml",
    "parse_yaml_scalar",
    "get_logger",
    "get_nop_logger",
    "LoggerConfig",
    "RotationConfig",
    "override_logger_config",
    "override_rotation_config",
    "build_logger",
    "add_boot_arguments",
    "add_boot_config_path_argument",
    "add_boot_config_override_argument",
    "rand_string",
    "default_if_empty",
    "get_username_from_basic_auth",
    "get_password_from_basic_auth",
    "extract_scheme_from_url",
    "get_env_value_or_default",
    "get_locale",
    "match_locale_with_env",
    "get_local_ip",
    "get_local_hostname",
    "generate_request_id",
    "generate_request_id_with_prefix",
    "convert_json_to_map",
    "convert_struct_to_bytes",
    "convert_struct_to_json",
    "convert_struct_to_json_pretty",
    "convert_struct_to_map",
    "convert_struct_to_fields",
    "GitError",
    "GitInfo",
    "Commit",
    "Committer",
    "AppMeta",
    "get_package_name",
    "get_current_tag",
    "get_remote_url",
    "get_branch",
    "get_latest_commit",
    "get_git_info",
    "read_app_meta",
    "DEFAULT_FILE_MODE",
    "resolve_resource",
    "copy_resource_file",
    "copy_resource_dir",
]
