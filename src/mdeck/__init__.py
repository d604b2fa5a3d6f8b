app_name = "mdeck"
__version__ = "0.3.0"
