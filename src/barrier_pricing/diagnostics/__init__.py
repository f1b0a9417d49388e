from .replication import legs_frame, payoff_check_frame

__all__ = ["legs_frame", "payoff_check_frame"]
