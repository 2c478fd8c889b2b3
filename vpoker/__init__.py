"""
vpoker: Jacks or Better Video Poker

A single-hand, five-card video poker machine: an unbiased 52-card deck,
a hand evaluator with the classic 9/6 Jacks or Better paytable, and a
game session that sequences betting, dealing, holding, drawing and payout.
"""

__version__ = "0.1.0"
