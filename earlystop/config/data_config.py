#!filepath: earlystop/config/data_config.py
from pydantic import BaseModel, Field


class DataConfig(BaseModel):
    """
    Synthetic classification problem + split fractions.
    Datasets are generated in memory; there is no file loading.
    """

    n_samples: int = Field(768, ge=4)
    n_features: int = Field(8, ge=1)
    n_informative: int = Field(4, ge=1)
    n_classes: int = Field(2, ge=2)
    class_sep: float = 0.8
    flip_y: float = Field(0.1, ge=0.0, le=1.0)

    test_fraction: float = Field(0.25, gt=0.0, lt=1.0)
    validation_fraction: float = Field(0.25, gt=0.0, lt=1.0)
    shuffle: bool = True
