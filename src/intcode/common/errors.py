class IntcodeError(Exception):
    pass
