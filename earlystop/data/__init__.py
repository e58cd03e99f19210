from .dataset import (
    LabeledData,
    make_classification_data,
    shuffle,
    split_at_element,
    split_fraction,
)

__all__ = [
    "LabeledData",
    "make_classification_data",
    "shuffle",
    "split_at_element",
    "split_fraction",
]
