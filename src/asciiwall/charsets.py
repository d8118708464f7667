# Ordered from densest to lightest; index 0 is picked for the brightest pixels
DENSE_TO_LIGHT = "@#S%?*+;:,."
