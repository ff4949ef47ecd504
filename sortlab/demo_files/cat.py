# cat.py
# A user defined type that the sort engines can order through its "<" operator.

from sortlab.Utils import load_values


class Cat:
    def __init__(self, weight=0):
        self.weight = weight

    def __lt__(self, other):
        # Cats are compared by weight, any total order would do
        return other.weight > self.weight

    def __eq__(self, other):
        if not isinstance(other, Cat):
            return NotImplemented
        return self.weight == other.weight

    def __hash__(self):
        return hash(self.weight)

    @classmethod
    def parse(cls, token):
        return cls(int(token))

    def __str__(self):
        return str(self.weight)

    def __repr__(self):
        return f"Cat({self.weight})"


def load_cats(filepath):
    """
    Reads cat weights from a file, stopping at the first one that is not an integer.
    """
    return load_values(filepath, parse=Cat.parse)
