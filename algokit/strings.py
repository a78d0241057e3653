"""String puzzles: reversals, IP address generation, sign-in logs."""

import re

_ALNUM_RUN = re.compile(r"[A-Za-z0-9]+")


def reverse_string(text):
    """The characters of text in reverse order."""
    return text[::-1]


def reverse_words(text):
    """Reverse each space-separated word in place, keeping word order."""
    return " ".join(word[::-1] for word in text.split(" "))


def reverse_alnum_runs(text):
    """Reverse every run of ASCII letters and digits, leaving the other
    characters where they are."""
    return _ALNUM_RUN.sub(lambda match: match.group()[::-1], text)


def _valid_octet(part):
    if len(part) > 3 or int(part) > 255:
        return False
    return len(part) == 1 or part[0] != "0"


def generate_ip_addresses(digits):
    """Every dotted IPv4 address obtained by putting three dots into digits.

    Raises ValueError when digits holds anything but decimal digits.
    """
    if not digits.isdigit() or not digits.isascii():
        raise ValueError(f"expected a string of digits, got {digits!r}")
    length = len(digits)
    if not 4 <= length <= 12:
        return []
    found = []
    for i in range(1, length - 2):
        for j in range(i + 1, length - 1):
            for k in range(j + 1, length):
                parts = (digits[:i], digits[i:j], digits[j:k], digits[k:])
                if all(_valid_octet(part) for part in parts):
                    found.append(".".join(parts))
    return found


def users_signed_out_within(logs, max_duration):
    """Ids, ascending, of users whose sign-out came at most max_duration
    after their sign-in.

    Each log line starts with a user id and a time. A user's first line is
    the sign-in; each later line replaces the stored value with its distance
    from the line's time and marks the user signed out.
    Raises ValueError for a line without an integer id and time.
    """
    state = {}
    for line in logs:
        fields = line.split()
        if len(fields) < 2:
            raise ValueError(f"malformed log line {line!r}")
        try:
            user, time = int(fields[0]), int(fields[1])
        except ValueError as error:
            raise ValueError(f"malformed log line {line!r}") from error
        if user in state:
            state[user] = (abs(state[user][0] - time), True)
        else:
            state[user] = (time, False)
    return sorted(
        user
        for user, (duration, signed_out) in state.items()
        if signed_out and duration <= max_duration
    )