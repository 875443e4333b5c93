class StoreBrowserError(Exception):
    """Base exception for all store_browser errors"""
    pass


class ConfigError(StoreBrowserError):
    """Invalid or inconsistent global.json"""
    pass


class DataFetchError(StoreBrowserError):
    """
    The store CSV could not be fetched or parsed, or holds no usable records.
    Fatal for the session: no dashboard content is rendered.
    """
    pass


class BoundaryFetchError(StoreBrowserError):
    """Country boundary GeoJSON unreachable or malformed"""
    pass
