class ListOpsError(Exception):
    """base class for every error raised by listops itself"""


class IndexOutOfBoundsError(ListOpsError, IndexError):
    """a required position does not exist in the list"""

    def __init__(self, index: int, length: int, message: str = None):
        self.index = index
        self.length = length
        super().__init__(message or f"index {index} out of bounds for list of length {length}")


class EmptyListError(IndexOutOfBoundsError, ValueError):
    """an element was required but the list has none"""

    def __init__(self, index: int = 0):
        super().__init__(index, 0, "list is empty")
