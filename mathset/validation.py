import mathset
import typing

def validateMandatoryInt(
        name: str,
        value: int,
        min: typing.Optional[int] = None,
        max: typing.Optional[int] = None,
        validationFn: typing.Optional[typing.Callable[[str, int], typing.Any]] = None
        ) -> int:
    # NOTE: bool is a subclass of int but passing one as a count is always a mistake
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f'{name} must be an int')

    if min is not None and max is not None and (value < min or value > max):
        raise ValueError(f'{name} must be in the range {min} to {max}')
    elif min is not None and value < min:
        raise ValueError(f'{name} must be >= {min}')
    elif max is not None and value > max:
        raise ValueError(f'{name} must be <= {max}')

    if validationFn is not None:
        validationFn(name, value)

    return value

def validateOptionalInt(
        name: str,
        value: typing.Optional[int],
        min: typing.Optional[int] = None,
        max: typing.Optional[int] = None,
        validationFn: typing.Optional[typing.Callable[[str, typing.Optional[int]], typing.Any]] = None
        ) -> typing.Optional[int]:
    if value is not None:
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f'{name} must be an int or None')

        if min is not None and max is not None and (value < min or value > max):
            raise ValueError(f'{name} must be in the range {min} to {max} or None')
        elif min is not None and value < min:
            raise ValueError(f'{name} must be >= {min} or None')
        elif max is not None and value > max:
            raise ValueError(f'{name} must be <= {max} or None')

    if validationFn is not None:
        validationFn(name, value)

    return value

def validateMandatorySet(
        name: str,
        value: 'mathset.Set',
        validationFn: typing.Optional[typing.Callable[[str, 'mathset.Set'], typing.Any]] = None
        ) -> 'mathset.Set':
    if not isinstance(value, mathset.Set):
        raise TypeError(f'{name} must be a Set')

    if validationFn is not None:
        validationFn(name, value)

    return value

def validateCapacityHint(
        name: str,
        value: typing.Optional[int]
        ) -> typing.Optional[int]:
    return validateOptionalInt(name=name, value=value, min=0)
