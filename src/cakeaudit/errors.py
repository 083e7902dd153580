class CakeauditError(Exception):
    pass


class ConfigError(CakeauditError):
    pass


class InputError(CakeauditError):
    pass


class FormatError(CakeauditError):
    pass


class UsageError(CakeauditError):
    pass
