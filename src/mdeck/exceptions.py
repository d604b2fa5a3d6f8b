class MdeckError(Exception):
    pass


class MalformedInputError(MdeckError):
    pass


class ThemeNotFoundError(MdeckError):
    pass


class InvalidThemeError(MdeckError):
    pass


class AssetNotFoundError(MdeckError):
    pass


class ExportError(MdeckError):
    pass


class PushConnectionError(MdeckError):
    pass
