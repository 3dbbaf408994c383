from crisp.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
