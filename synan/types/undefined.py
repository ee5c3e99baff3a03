from __future__ import annotations


class UndefinedType:
    """The unit value: result of declarations and of functions that fall off the end."""
    def __repr__(self): return "undefined"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, UndefinedType)

    def __hash__(self):
        return hash(UndefinedType)


Undefined = UndefinedType()
