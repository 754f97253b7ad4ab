"""Meme prompt and caption selection."""

import random


MEME_PROMPTS = (
    "Create a funny motivational meme showing a person with dark short hair studying frontend development with text overlay saying 'Study or face the soldering iron!' in a humorous way",
    "Generate a meme with a Kazakh person with dark short hair looking at code, with text 'HR to Frontend: Study or we'll get the whip!' as a playful threat",
    "Create a humorous meme showing someone procrastinating on learning frontend, with text overlay 'The soldering iron is waiting... better start studying!'",
    "Generate a funny meme with a person with dark short hair holding a soldering iron menacingly, with text 'Frontend development or else...' as a joke",
    "Create a motivational meme showing a person switching from HR to frontend development, with text 'Study hard or face the consequences!' in a playful way",
    "Generate a meme with someone with dark short hair being chased by a soldering iron, with text overlay 'When you don't study frontend: The consequences are coming!'",
    "Create a funny meme showing a lazy person avoiding coding practice, with text 'HR colleague: Study frontend or the pole and whip await!'",
    "Generate a humorous meme with a Kazakh person with dark short hair coding, with text overlay 'From HR to Frontend: Study or suffer!' as a joke",
    "Create a meme showing someone being motivated to study with a soldering iron in the background, with text 'Frontend development: Study now or regret later!'",
    "Generate a funny motivational meme with a person with dark short hair looking at JavaScript tutorials, with text 'The soldering iron remembers... study frontend!'",
)

MEME_CAPTIONS = (
    "Study frontend or the soldering iron awaits! 🔥",
    "HR to Frontend transition: Study hard or face the consequences! 😄",
    "Remember: The whip and pole are watching... time to study! 📚",
    "Frontend development won't learn itself! Better start studying! 💻",
    "The soldering iron remembers... study or else! ⚡",
    "From HR to Frontend: Study now, thank yourself later! 🚀",
    "Procrastination detected! Time to study frontend! 📖",
    "The consequences of not studying are coming... better start coding! 😅",
    "HR colleague, the frontend path requires study! No excuses! 💪",
    "Study frontend development or the soldering iron will find you! 🔧",
)

_random = random.Random()


def select_prompt(rng: random.Random | None = None) -> str:
    """Pick a meme prompt uniformly at random."""
    return (rng or _random).choice(MEME_PROMPTS)


def select_caption(rng: random.Random | None = None) -> str:
    """Pick a meme caption uniformly at random."""
    return (rng or _random).choice(MEME_CAPTIONS)
