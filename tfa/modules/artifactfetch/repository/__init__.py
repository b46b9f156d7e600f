from .path_resolver import RepositoryPathResolver, cache_file_name, resolve_cache_path

__all__ = ["RepositoryPathResolver", "resolve_cache_path", "cache_file_name"]
