from gridsnake.core.interfaces import score_text
from .renderer_headless import HeadlessRenderer
from .renderer_pygame import PygameRenderer
from .keyboard import Keyboard
from .pygame_scheduler import PygameScheduler
