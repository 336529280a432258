# errors
# (exceptions raised by the password generator)
#


class GeneratorError(Exception):

    """Base class of recoverable generation failures."""

    message = "password generation failed"

    def __init__(self, msg=None):
        Exception.__init__(self, msg or self.message)


class CompositionError(GeneratorError, ValueError):

    """The requested composition cannot be satisfied.

    Always raised before any random bytes are consumed.

    """


class ExceedsTotalLength(CompositionError):
    message = "number of digits and symbols must be less than total length"


class LettersExceedsAvailable(CompositionError):
    message = "number of letters exceeds available letters and repeats are not allowed"


class DigitsExceedsAvailable(CompositionError):
    message = "number of digits exceeds available digits and repeats are not allowed"


class SymbolsExceedsAvailable(CompositionError):
    message = "number of symbols exceeds available symbols and repeats are not allowed"


class InvalidCount(CompositionError):
    message = "length, number of digits and number of symbols must not be negative"


class RandomSourceError(GeneratorError):
    message = "random source failed to supply enough bytes"


class PolicyUnsatisfiable(GeneratorError):
    message = "no generated password matched the policy within the attempt limit"


class InvalidConfig(GeneratorError, ValueError):
    message = "invalid generator configuration"


class GenerationAborted(RuntimeError):

    """Raised by the `must_*` variants for any failure of `generate`.

    Not a `GeneratorError`, handlers of recoverable errors must not
    catch it. The original error is chained as `__cause__`.

    """
