from models.generation import ErrorResponse, Generation

__all__ = ["ErrorResponse", "Generation"]
