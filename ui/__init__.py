# UI module for Breathing Exercises application
from .main_window import MainWindow
from .preset_page import PresetPage
from .exercise_page import ExercisePage

__all__ = ['MainWindow', 'PresetPage', 'ExercisePage']
