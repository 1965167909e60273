from dilemma.game.models import Difficulty, Move

TITLE = "[*] GAME THEORY: PRISONER'S DILEMMA [*]"
SUBTITLE = "Terminal Edition - Strategic Gameplay"

MAIN_MENU_OPTIONS = {
    "1": "[>] PLAY - Start a new game",
    "2": "[@] STATS - View your statistics",
    "3": "[?] RULES - How to play",
    "4": "[X] QUIT - Exit game",
}

# Keys are what the player types at the difficulty prompt
DIFFICULTY_OPTIONS = {
    "1": Difficulty.EASY,
    "2": Difficulty.MEDIUM,
    "3": Difficulty.HARD,
    "4": Difficulty.LEGENDARY,
}

DIFFICULTY_STYLES = {
    Difficulty.EASY: "green",
    Difficulty.MEDIUM: "yellow",
    Difficulty.HARD: "red",
    Difficulty.LEGENDARY: "magenta",
}

DIFFICULTY_DESCRIPTIONS = {
    Difficulty.EASY: "Computer cooperates 70% of the time",
    Difficulty.MEDIUM: "Computer plays tit-for-tat, with the odd betrayal",
    Difficulty.HARD: "Computer punishes players who defect too often",
    Difficulty.LEGENDARY: "Computer is unpredictable and ruthless",
}

MOVE_OPTIONS = {
    "1": Move.COOPERATE,
    "2": Move.DEFECT,
}

MOVE_LABELS = {
    Move.COOPERATE: ("[1] COOPERATE", "[C]", "Trust and work together for mutual benefit"),
    Move.DEFECT: ("[2] DEFECT", "[D]", "Act in self-interest and betray"),
}

PAYOFF_LABELS = [
    # (player move, opponent move, description, name, style)
    (Move.COOPERATE, Move.COOPERATE, "Both Cooperate", "Mutual Benefit", "green"),
    (Move.COOPERATE, Move.DEFECT, "You Cooperate, Opponent Defects", "Sucker's Payoff", "yellow"),
    (Move.DEFECT, Move.COOPERATE, "You Defect, Opponent Cooperates", "Temptation Payoff", "red"),
    (Move.DEFECT, Move.DEFECT, "Both Defect", "Mutual Punishment", "magenta"),
]

RULES = [
    "1. Each round, you and the computer choose to COOPERATE or DEFECT",
    "2. Your combined choices determine points earned this round",
    "3. The player with the highest score after all rounds WINS!",
]

STRATEGY_TIPS = [
    ("+ Cooperate for steady gains but risk being exploited", "green"),
    ("- Defect for short-term advantage but risk mutual punishment", "red"),
    ("* Pay attention to opponent patterns and adapt", "magenta"),
    ("^ Mix strategies to keep opponent guessing", "yellow"),
]

VERDICTS = {
    # outcome value -> (headline, message, style)
    "win": ("[WIN] VICTORY! YOU WON! [WIN]", "You outmaneuvered the computer and claimed victory!", "green"),
    "loss": ("[LOSS] DEFEAT! THE COMPUTER WON! [LOSS]", "The computer played a superior strategy this game.", "red"),
    "tie": ("[TIE] IT'S A TIE! [TIE]", "Both players fought to a draw!", "yellow"),
}

ROUND_VERDICTS = {
    "win": (">> YOU WIN THIS ROUND! <<", "bold bright_green"),
    "loss": (">> COMPUTER WINS THIS ROUND! <<", "bold bright_red"),
    "tie": (">> BOTH EARNED EQUALLY <<", "bold yellow"),
}

NO_GAMES_YET = "No games played yet. Start playing to build your statistics!"
GOODBYE = "Thanks for playing! Goodbye!"
