"""
SensorTag TicTacToe
===================
TicTacToe played with a motion sensor: the two buttons move a cursor
around the board and shaking the sensor plays a piece at the cursor.
A computer player can take either side.

Packages:
- logic: board engine, rules and computer players
- motion: high-pass filter, shake and button detection
- controller: turns, cursor, thinking delay and score
"""

__version__ = "1.0.0"
