from .error_function import ErrorFunction, evaluate

__all__ = ["ErrorFunction", "evaluate"]
