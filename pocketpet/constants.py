import os

# --- GLOBAL CONFIGURATION ---
SCREEN_WIDTH = 480
SCREEN_HEIGHT = 320
FPS = int(os.getenv("POCKETPET_FPS", "30"))
SAVE_FILE = os.getenv("POCKETPET_SAVE_FILE", "pet_save.json")
# Live decay period. Offline catch-up always replays one tick per minute.
TICK_INTERVAL_MS = int(os.getenv("POCKETPET_TICK_MS", "5000"))
MAX_CATCHUP_MINUTES = 60

# --- VITALS ---
STAT_MIN = 0
STAT_MAX = 100

DEFAULT_HEALTH = 100
DEFAULT_HUNGER = 0    # 0 = Full, 100 = Starving
DEFAULT_ENERGY = 80
DEFAULT_CLEAN = 80

# Per-tick deltas
SLEEP_HUNGER_GAIN = 2
SLEEP_ENERGY_GAIN = 6
SLEEP_CLEAN_LOSS = 1
SLEEP_HEALTH_GAIN = 1

AWAKE_HUNGER_GAIN = 3
AWAKE_ENERGY_LOSS = 2
AWAKE_CLEAN_LOSS = 1

# Health penalties while awake (these stack)
STARVING_HUNGER = 80
STARVING_PENALTY = 3
PECKISH_HUNGER = 60
PECKISH_PENALTY = 1
EXHAUSTED_ENERGY = 10
EXHAUSTED_PENALTY = 2
FILTHY_CLEAN = 10
FILTHY_PENALTY = 2

AUTO_WAKE_ENERGY = 98

# --- ACTIONS ---
FEED_HUNGER = 25
FEED_CLEAN_COST = 5
FEED_ENERGY = 5

PLAY_MIN_ENERGY = 10  # play refused at or below this
PLAY_ENERGY_COST = 18
PLAY_HUNGER_COST = 8
PLAY_CLEAN_COST = 10
PLAY_HEALTH = 3

HEAL_MIN_ENERGY = 8   # heal refused at or below this
HEAL_HEALTH = 18
HEAL_CLEAN = 12
HEAL_ENERGY_COST = 10

# --- MOOD THRESHOLDS ---
SICK_HEALTH = 25
HUNGRY_HUNGER = 75
TIRED_ENERGY = 25
DIRTY_CLEAN = 25
HAPPY_HEALTH = 70
HAPPY_HUNGER = 40
HAPPY_ENERGY = 40

# --- EMPHASIS ANIMATION ---
EMPHASIS_DURATION = 0.5  # seconds
MESSAGE_DURATION = 3     # seconds

# --- RETRO UI PALETTE ---
COLOR_BG = (40, 44, 52)
COLOR_UI_BAR_BG = (62, 68, 81)
COLOR_TEXT = (171, 178, 191)
COLOR_HEALTH = (152, 195, 121)
COLOR_HUNGER = (224, 108, 117)
COLOR_ENERGY = (97, 175, 239)
COLOR_CLEAN = (229, 192, 123)
COLOR_CHIP_BORDER = (90, 96, 110)

# Pet body tint per mood
COLOR_PET_HAPPY = (171, 220, 255)
COLOR_PET_HUNGRY = (255, 190, 120)
COLOR_PET_SLEEPY = (150, 150, 200)
COLOR_PET_SICK = (198, 120, 221)
COLOR_PET_OKAY = (200, 210, 220)
COLOR_PET_EYES = (33, 37, 43)

# Button colours
COLOR_BTN_FEED = (255, 165, 0)
COLOR_BTN_PLAY = (100, 149, 237)
COLOR_BTN_SLEEP = (150, 150, 200)
COLOR_BTN_HEAL = (152, 195, 121)
COLOR_BTN_PAUSE = (200, 200, 200)
COLOR_BTN_RESET = (224, 108, 117)

RETRO_SHADOW = (20, 22, 26)
RETRO_DARK = (33, 37, 43)
BUTTON_SHADOW_OFFSET = 3
BUTTON_BORDER_RADIUS = 8
BUTTON_GLASS_ALPHA = 40
BUTTON_BORDER_WIDTH = 2
