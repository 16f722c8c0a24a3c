# Message type constants (stringly-typed protocol; canonical list lives here)

T_STATE = "state"
T_COMMAND = "command"

# Commands understood by the bundled control page and presentation clients.
# The relay itself routes any command name untouched.
CMD_PREVIOUS = "previous"
CMD_NEXT = "next"
CMD_GOTO = "goto"
CMD_TOGGLE_AUTO = "toggle_auto"
CMD_FULLSCREEN = "fullscreen"
CMD_RESET = "reset"
CMD_PLAY_TIMELINE = "play_timeline"
CMD_DEMONSTRATE_EASING = "demonstrate_easing"
CMD_TRIGGER_FINALE = "trigger_finale"

KNOWN_COMMANDS = (
    CMD_PREVIOUS,
    CMD_NEXT,
    CMD_GOTO,
    CMD_TOGGLE_AUTO,
    CMD_FULLSCREEN,
    CMD_RESET,
    CMD_PLAY_TIMELINE,
    CMD_DEMONSTRATE_EASING,
    CMD_TRIGGER_FINALE,
)

WS_PATH = "/presentation"
