from hill_regression.data.dataset import Dataset, load_table

__all__ = ["Dataset", "load_table"]
