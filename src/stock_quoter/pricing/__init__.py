"""Time estimation, material codes and shop lookup tables."""
