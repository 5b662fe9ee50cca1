"""File module - disk-backed asset host for the preload builder."""

from preloadgen.files.host import FileSystemHost, detect_package_name, validate_path_in_root

__all__ = ["FileSystemHost", "detect_package_name", "validate_path_in_root"]
