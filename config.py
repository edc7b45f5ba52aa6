import os


class Config:
    # Where the in-progress game is kept between runs
    SAVE_PATH = os.environ.get('CALENDAR_SAVE_PATH') or os.path.join(
        os.path.expanduser('~'), '.calendar_puzzle.json'
    )
    LOG_LEVEL = os.environ.get('CALENDAR_LOG_LEVEL', 'INFO').upper()
    FPS = int(os.environ.get('CALENDAR_FPS', '60'))
    # Board cell size in pixels
    CELL_SIZE = int(os.environ.get('CALENDAR_CELL_SIZE', '64'))
