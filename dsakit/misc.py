"""Small curiosities."""


def printed_width_sum(x: int, y: int) -> int:
    """Add two integers by counting the characters of two width-padded fields.

    A negative width left-justifies; a width below one still prints one character.
    """
    return len("%*c%*c" % (x, "\r", y, "\r"))