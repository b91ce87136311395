from setuptools import setup, find_packages

setup(
    name="ultimate-tictactoe-search",
    version="0.1.0",
    description="Ultimate Tic-Tac-Toe with minimax (alpha-beta, Zobrist TT, quiescence) and MCTS agents",
    packages=find_packages(include=["game", "game.*", "ai", "ai.*", "evaluation", "evaluation.*"]),
    py_modules=["config", "play"],
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "uttt-play=play:main",
        ],
    },
)
