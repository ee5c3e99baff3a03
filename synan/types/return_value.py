from synan import Value


class ReturnValue:
    """Marks a value produced by a return statement.

    Sequences stop at the first ReturnValue and hand it upward; a compound
    function call unwraps it. The content is never itself a ReturnValue.
    """
    __slots__ = ("content",)

    def __init__(self, content: Value):
        self.content = content

    def __repr__(self):
        return f"ReturnValue({self.content!r})"
