"""
Typeclass instances passed as explicit values.

Modules:
    monoid: Monoid (identity + associative append), instances and mconcat
    num: Num arithmetic protocol and INT_NUM
    bounded: Bounded (min_bound, max_bound) instances
    enums: DefaultEnum with BOOL_ENUM, INT_ENUM and enum_of
    const: The Const applicative

There is no registry keyed by type. Callers choose an instance and pass it,
e.g. ``mconcat(values, sum_of(INT_NUM))``.

Tags:
    funspine, typeclasses, monoid, enum, algebra

Doc-Types:
    package-overview
"""

from funspine.typeclasses.bounded import (
    BOOL_BOUNDED,
    FLOAT_BOUNDED,
    ORDERING_BOUNDED,
    UNIT_BOUNDED,
    Bounded,
    bounded_enum,
)
from funspine.typeclasses.const import Const
from funspine.typeclasses.enums import BOOL_ENUM, INT_ENUM, DefaultEnum, enum_of
from funspine.typeclasses.monoid import (
    ALL,
    ANY,
    ORDERING,
    STRING,
    UNIT,
    Monoid,
    endo,
    func,
    maybe_first,
    maybe_last,
    mconcat,
    product_of,
    sequence_concat,
    sum_of,
    tuple2,
)
from funspine.typeclasses.num import INT_NUM, Num

__all__ = [
    # Monoid
    "Monoid",
    "mconcat",
    "UNIT",
    "ALL",
    "ANY",
    "STRING",
    "ORDERING",
    "tuple2",
    "func",
    "sum_of",
    "product_of",
    "sequence_concat",
    "maybe_first",
    "maybe_last",
    "endo",
    # Num
    "Num",
    "INT_NUM",
    # Bounded
    "Bounded",
    "BOOL_BOUNDED",
    "ORDERING_BOUNDED",
    "FLOAT_BOUNDED",
    "UNIT_BOUNDED",
    "bounded_enum",
    # Enum
    "DefaultEnum",
    "BOOL_ENUM",
    "INT_ENUM",
    "enum_of",
    # Applicative
    "Const",
]
