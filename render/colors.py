"""
organism_sim module: render/colors.py

Central color palette.
"""

BG = (0, 0, 0)
FOOD = (255, 255, 255)
DEATH_RING = (255, 255, 255)
HUD_TEXT = (235, 235, 235)

# entity fill runs from HEALTHY at full energy to STARVING at none
HEALTHY = (0, 255, 0)
STARVING = (255, 0, 0)
