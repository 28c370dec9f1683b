from .core import Session, SessionState, iter_tokens, run_session

__all__ = ["Session", "SessionState", "iter_tokens", "run_session"]
