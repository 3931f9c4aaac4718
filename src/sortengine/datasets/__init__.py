"""
Datasets package public API.

    from sortengine.datasets import make_dataset, SUPPORTED_DISTS
    make_dataset(1000, {"dist": "few_uniques", "params": {"k": 8}}, rng)
"""

from .generators import SUPPORTED_DISTS, make_dataset

__all__ = ["make_dataset", "SUPPORTED_DISTS"]
