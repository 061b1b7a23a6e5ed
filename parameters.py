"""System parameters for the non-transitive dice game.

All system-wide constants are defined here and imported by other modules.
"""

# Commitment configuration
KEY_BYTES = 32  # Secret HMAC key length (256 bits)
HMAC_ALGORITHM = "sha3_256"  # hashlib name used for the commitment digest

# Raw random source configuration
RAW_BITS = 32  # Width of each raw draw before reduction
RAW_BYTES = RAW_BITS // 8

# Game configuration
MIN_DICE = 3  # Minimum number of dice needed to play
FIRST_MOVE_RANGE = 2  # 0 = player moves first, 1 = computer moves first

# Display configuration
PROBABILITY_DECIMALS = 4  # Decimal places in the probability table

# Simulation configuration
NUM_SIMULATIONS = 200  # Total number of simulated rounds

# Example dice shown in usage messages
EXAMPLE_DICE = ["2,2,4,4,9,9", "1,1,6,6,8,8", "3,3,5,5,7,7"]

# Derived constants
RAW_SPACE = 2**RAW_BITS  # Number of distinct raw values
