"""Configuration constants for triecomplete."""

from __future__ import annotations

import os

# Queries shorter than this return no results.
MIN_PREFIX_LENGTH = 2

# ── Word list resolution ────────────────────────────────────────────────
# Tried in order after an explicit --dict path; first file with words wins.

SYSTEM_WORDS_PATH = "/usr/share/dict/words"

DICTIONARY_SEARCH_PATHS: list[str] = [
    "popular.txt",
    "words.txt",
    "dictionary.txt",
    os.path.join(os.path.dirname(os.path.abspath(__file__)), "words.txt"),
    SYSTEM_WORDS_PATH,
]

# Sources for `triecomplete fetch`, tried in order.
WORD_LIST_URLS: list[str] = [
    "https://raw.githubusercontent.com/dolph/dictionary/master/popular.txt",
]

DEFAULT_WORD_LIST = "popular.txt"

# ── Benchmark defaults ──────────────────────────────────────────────────

BENCH_ITERATIONS = 1_000
BENCH_WARMUP = 100

# Fallback vocabulary when no word list file is available.
MINIMAL_WORDS: tuple[str, ...] = (
    "able", "about", "above", "accept", "across", "act", "action", "add",
    "after", "again", "age", "agent", "ago", "agree", "air", "all", "allow",
    "almost", "alone", "along", "already", "also", "always", "among",
    "and", "animal", "another", "answer", "any", "apple", "area", "argue",
    "arm", "around", "art", "ask", "attack", "away", "baby", "back", "bad",
    "bag", "ball", "bank", "bar", "base", "be", "bear", "beat", "beautiful",
    "because", "become", "bed", "before", "begin", "behind", "believe",
    "best", "better", "between", "big", "bird", "bit", "bite", "bites",
    "black", "blood", "blue", "board", "body", "book", "born", "both",
    "box", "boy", "break", "bring", "brother", "build", "business", "but",
    "buy", "call", "camera", "can", "car", "card", "care", "carry", "case",
    "cat", "catch", "cause", "cell", "center", "chair", "chance", "change",
    "child", "choice", "choose", "city", "class", "clear", "close", "cold",
    "color", "come", "common", "computer", "cost", "could", "country",
    "course", "cover", "create", "cup", "cut", "dark", "data", "day",
    "dead", "deal", "decide", "deep", "degree", "design", "detail", "die",
    "different", "dinner", "direction", "dog", "door", "down", "draw",
    "dream", "drive", "drop", "during", "each", "early", "east", "easy",
    "eat", "edge", "effect", "eight", "either", "else", "end", "enjoy",
    "enough", "enter", "even", "evening", "event", "ever", "every", "exact",
    "example", "eye", "face", "fact", "fall", "family", "far", "fast",
    "father", "fear", "feel", "few", "field", "fight", "figure", "fill",
    "film", "final", "find", "fine", "finger", "finish", "fire", "first",
    "fish", "five", "floor", "fly", "follow", "food", "foot", "for",
    "force", "forget", "form", "forward", "four", "free", "friend", "from",
    "front", "full", "fun", "game", "garden", "gas", "general", "get",
    "girl", "give", "glass", "go", "goal", "good", "great", "green",
    "ground", "group", "grow", "guess", "gun", "hair", "half", "hand",
    "happen", "happy", "hard", "have", "head", "hear", "heart", "heat",
    "heavy", "help", "here", "high", "history", "hit", "hold", "home",
    "hope", "horse", "hot", "hotel", "hour", "house", "how", "huge",
    "human", "idea", "image", "imagine", "important", "inside", "into",
    "island", "issue", "item", "job", "join", "just", "keep", "key", "kid",
    "kill", "kind", "king", "kitchen", "know", "land", "language", "large",
    "last", "late", "laugh", "law", "lay", "lead", "learn", "leave", "left",
    "leg", "less", "letter", "level", "lie", "life", "light", "like",
    "line", "list", "listen", "little", "live", "long", "look", "lose",
    "loss", "lot", "love", "low", "machine", "main", "make", "man", "many",
    "map", "mark", "market", "matter", "may", "mean", "meet", "member",
    "memory", "message", "method", "middle", "might", "mind", "minute",
    "miss", "model", "money", "month", "more", "morning", "most", "mother",
    "mouth", "move", "much", "music", "must", "name", "nation", "near",
    "need", "never", "new", "news", "next", "nice", "night", "nine", "no",
    "north", "note", "nothing", "now", "number", "ocean", "off", "offer",
    "office", "often", "oil", "old", "once", "one", "only", "open", "order",
    "other", "our", "out", "over", "own", "page", "pain", "paper", "parent",
    "part", "party", "pass", "past", "path", "pay", "peace", "people",
    "person", "pick", "picture", "piece", "place", "plan", "plant", "play",
    "point", "poor", "power", "present", "press", "pretty", "price",
    "print", "problem", "program", "public", "pull", "push", "put",
    "question", "quick", "quiet", "race", "rain", "raise", "reach", "read",
    "ready", "real", "reason", "red", "remember", "report", "rest",
    "result", "rich", "ride", "right", "river", "road", "rock", "room",
    "round", "rule", "run", "safe", "same", "save", "say", "school", "sea",
    "season", "seat", "second", "see", "seem", "sell", "send", "sense",
    "serve", "set", "seven", "shake", "shape", "share", "ship", "shoot",
    "short", "show", "side", "sign", "simple", "sing", "sister", "sit",
    "six", "size", "skill", "skin", "sleep", "slow", "small", "smile",
    "snow", "soft", "soil", "some", "son", "song", "soon", "sound", "south",
    "space", "speak", "special", "speed", "spend", "sport", "spring",
    "stage", "stand", "star", "start", "state", "stay", "step", "still",
    "stone", "stop", "store", "story", "street", "strong", "student",
    "study", "style", "sun", "sure", "system", "table", "take", "talk",
    "tall", "teach", "team", "tell", "ten", "test", "than", "thank",
    "that", "the", "then", "there", "these", "thing", "think", "three",
    "through", "throw", "time", "today", "together", "tonight", "too",
    "top", "total", "touch", "toward", "town", "trade", "train", "travel",
    "tree", "trip", "true", "try", "turn", "two", "type", "under", "unit",
    "until", "up", "use", "usual", "value", "very", "view", "visit",
    "voice", "vote", "wait", "walk", "wall", "want", "war", "watch",
    "water", "way", "weak", "wear", "week", "weight", "well", "west",
    "what", "wheel", "when", "where", "which", "while", "white", "who",
    "whole", "why", "wide", "wife", "will", "win", "wind", "window",
    "winter", "wish", "with", "woman", "wonder", "wood", "word", "work",
    "world", "worry", "write", "wrong", "yard", "year", "yellow", "yes",
    "yet", "you", "young", "your", "zero", "zone",
)
