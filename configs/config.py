"""Configuration constants for the face recognition shell."""

# Template settings
TEMPLATE_SIZE = (512, 512)  # (width, height) every image is normalized to

# Training settings
BULK_LOAD_SIZE = 1000  # images per incremental training batch
IMAGE_EXTENSIONS = {".png", ".jpg"}

# Recognizer settings
RECOGNIZER_EIGEN = "EIGEN"
RECOGNIZER_FISHER = "FISHER"
RECOGNIZER_LBPH = "LBPH"
EIGEN_NUM_COMPONENTS = 300
EIGEN_THRESHOLD = 10.0

# Label settings
LABEL_MODE_FILENAME = "filename"
LABEL_MODE_SEQUENTIAL = "sequential"
DEFAULT_LABEL_MODE = LABEL_MODE_FILENAME
LABEL_PATTERN = r"-(\d+)$"  # trailing "-<digits>" in the filename stem
UNKNOWN_LABEL = -1

# Database layout
RESIZED_DIR_NAME = "resized"
LABELS_SUFFIX = ".labels.json"  # registry sidecar written next to a saved model

# Shell settings
PROMPT = "Enter command: "
CMD_CREATE = "create"
CMD_TRAIN = "train"
CMD_LOAD = "load"
CMD_SAVE = "save"
CMD_SEARCH = "search"
CMD_EXIT = "exit"
CMD_QUIT = "quit"
