"""
Simian - Seedable Monkey Testing

A randomized UI-event generator for stress-testing application UIs:
- Monkey: weighted and fixed-interval action scheduler driven by a PCG PRNG
- Actions: tap, drag, pinch, rotate and device gestures built on the scheduler
- Actuators: collaborators that turn abstract events into real input

Usage:
    from simian.monkey import Monkey, Rect

    monkey = Monkey(frame=Rect(0, 0, 320, 480), seed=0)
    monkey.register_weighted(1, lambda: print("tap"))
    monkey.run(1000)
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
