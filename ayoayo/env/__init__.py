from .gym_env import AyoayoEnv

__all__ = ["AyoayoEnv"]
