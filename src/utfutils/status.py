'''
Conversion status and result types

Every conversion returns a ConversionResult. Failures are values, not exceptions:

    result = utf16_to_utf8(units, comply_with_standard = True)
    if result.status < ConversionStatus.Success:
        ...

Callers that prefer a direct return use unwrap(), which raises ConversionError
on failure.
'''

from dataclasses import dataclass
from typing import Any

from .common import IntEnum2


class ConversionStatus(IntEnum2):
    NonStandardEncoding = -1    # input violates a Unicode recommendation, strict mode only
    UndefinedError      = 0     # input cannot be converted under any mode
    Success             = 1


class ConversionError(ValueError):
    '''Raised by ConversionResult.unwrap() on a failed conversion'''

    def __init__(self, status: ConversionStatus):
        super().__init__(f'conversion failed: {status}')
        self.status = status


@dataclass(frozen = True)
class ConversionResult:
    status  : ConversionStatus
    value   : Any = None

    @classmethod
    def success(cls, value: Any) -> 'ConversionResult':
        return cls(ConversionStatus.Success, value)

    @classmethod
    def failure(cls, status: ConversionStatus) -> 'ConversionResult':
        # no partial output is ever attached to a failure
        return cls(status, None)

    @property
    def ok(self) -> bool:
        return self.status >= ConversionStatus.Success

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> Any:
        '''Return the converted sequence or raise ConversionError'''
        if not self.ok:
            raise ConversionError(self.status)

        return self.value
