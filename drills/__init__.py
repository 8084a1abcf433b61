"""drills — Introductory programming exercises.

Temperature conversion, array sums, character counting, factorial, max of two,
swapping, rectangles, complex numbers and a one-shot calculator, each runnable
on its own or replayed chapter by chapter.

Usage:
    python -m drills list           # Show exercises
    python -m drills tour 1         # Replay chapter 1
    python -m drills calc 10 + 5    # 10 + 5 = 15
"""
