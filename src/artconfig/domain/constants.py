"""Domain business rules and constants."""

import sys
from typing import Final

# Value domains - the widest range a bounded property can span
INTEGER_MIN: Final = -(2**31)
INTEGER_MAX: Final = 2**31 - 1
DECIMAL_MIN: Final = -sys.float_info.max
DECIMAL_MAX: Final = sys.float_info.max
MAX_TEXT_LENGTH: Final = 2**31 - 1

CLASSIFICATION_SLOTS: Final = 5

# Message keys - stable identifiers resolved by the message catalog
MSG_PROPERTY_IS_NULL: Final = "PropertyIsNull"
MSG_ARGUMENT_IS_NULL: Final = "ArgumentIsNull"
MSG_INVALID_ARGUMENT: Final = "InvalidArgument"
MSG_DUPLICATED_SEQUENCE: Final = "DuplicatedSequence"
MSG_DUPLICATED_NAME: Final = "DuplicatedPropertyName"
MSG_VALUE_NOT_FOUND: Final = "ValueNotFound"
MSG_PROPERTY_NOT_FOUND: Final = "PropertyNotFound"
MSG_ARTICLE_NOT_CONFIGURABLE: Final = "ArticleNotConfigurable"
MSG_VALUE_OUT_OF_BOUNDS: Final = "ValueOutOfBounds"
MSG_HIGHER_THAN_UPPER_BOUND: Final = "ValueHigherThanUpperBound"
MSG_LOWER_THAN_LOWER_BOUND: Final = "ValueLowerThanLowerBound"
MSG_INCOMPATIBLE_WITH_SET_VALUES: Final = "ValueIncompatibleWithSetValues"
MSG_MUST_BE_NON_NEGATIVE: Final = "ValueMustBeEqualOrGreaterThanZero"
MSG_BLANK_IDENTIFIER: Final = "BlankIdentifier"
