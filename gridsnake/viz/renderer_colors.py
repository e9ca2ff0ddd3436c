# gridsnake/viz/renderer_colors.py
BG = (15, 15, 15)
GRID = (30, 30, 30)
HEAD = (60, 200, 90)
BODY = (40, 160, 70)
HUD_BG = (25, 25, 25)
TEXT = (230, 230, 230)
OVERLAY = (235, 210, 60)
