"""Random passwords with a requested composition of letters, digits and symbols."""

from .errors import (GeneratorError, CompositionError, ExceedsTotalLength,
                     LettersExceedsAvailable, DigitsExceedsAvailable,
                     SymbolsExceedsAvailable, InvalidCount, InvalidConfig, RandomSourceError,
                     PolicyUnsatisfiable, GenerationAborted)
from .pwgen import (Generator, GeneratorInput, StatefulGenerator, new_generator,
                    generate, generate_with_policy, must_generate,
                    LOWER_LETTERS, UPPER_LETTERS, DIGITS, SYMBOLS)

__version__ = '1.0.0'
