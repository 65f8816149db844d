import logging
import mathset
import typing

_T = typing.TypeVar('_T')

def union(*sets: 'mathset.Set[_T]') -> 'mathset.Set[_T]':
    """Return a new Set holding every member of the given Sets.

    None of the arguments are modified. With no arguments an empty Set is
    returned.
    """
    for index, current in enumerate(sets):
        mathset.validateMandatorySet(name=f'sets[{index}]', value=current)

    if not sets:
        return mathset.Set()

    logging.debug(f'Folding union over {len(sets)} sets')

    # Work on a clone so the first Set isn't modified
    result = sets[0].clone(capacity=max(len(current) for current in sets))
    for current in sets[1:]:
        result.union(current)
    return result

def intersection(*sets: 'mathset.Set[_T]') -> 'mathset.Set[_T]':
    """Return a new Set holding the members common to all given Sets.

    None of the arguments are modified. With no arguments an empty Set is
    returned. This is a convention of this library, the intersection of no
    sets is not treated as a universal set.
    """
    for index, current in enumerate(sets):
        mathset.validateMandatorySet(name=f'sets[{index}]', value=current)

    if not sets:
        return mathset.Set()

    logging.debug(f'Folding intersection over {len(sets)} sets')

    result = sets[0].clone()
    for current in sets[1:]:
        if result.isEmpty():
            break
        result.intersect(current)
    return result
