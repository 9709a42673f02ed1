

class OrderBrowserError(Exception):
    """Base exception for all order_browser errors"""
    pass

class ConfigError(OrderBrowserError):
    """Invalid or inconsistent global.json"""
    pass

class RecordSchemaError(OrderBrowserError):
    """
    A raw order row cannot be turned into a Record
    (not an object, missing id, etc)
    """
    pass

class OrderNotFoundError(OrderBrowserError):
    """No order with the given id exists in the order store"""
    pass
