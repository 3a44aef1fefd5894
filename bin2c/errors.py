class Bin2CError(Exception):
    pass


# Bad word width or symbol name template.
class InvalidConfiguration(Bin2CError, ValueError):
    pass


# Unknown option, missing option value or too many file names.
class InvalidArgument(Bin2CError, ValueError):
    pass


# The compression library reported a failure.
class CompressionError(Bin2CError, RuntimeError):
    pass
