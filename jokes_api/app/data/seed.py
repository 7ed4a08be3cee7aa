"""
Built‑in seed list of jokes.

The list is loaded into every new ``JokeStore`` at startup.  The store
copies the records, so this module is never mutated at runtime.
"""

JOKE_TYPES = ["Science", "Puns", "Wordplay", "Math", "Food", "Sports", "Movies"]

SEED_JOKES = [
    {
        "id": 1,
        "jokeText": "Why don't scientists trust atoms? Because they make up everything.",
        "jokeType": "Science",
    },
    {
        "id": 2,
        "jokeText": "Why did the scarecrow win an award? Because he was outstanding in his field.",
        "jokeType": "Puns",
    },
    {
        "id": 3,
        "jokeText": "I used to be a banker, but I lost interest.",
        "jokeType": "Wordplay",
    },
    {
        "id": 4,
        "jokeText": "Why was the equal sign so humble? Because it knew it wasn't less than or greater than anyone else.",
        "jokeType": "Math",
    },
    {
        "id": 5,
        "jokeText": "What do you call a fake noodle? An impasta.",
        "jokeType": "Food",
    },
    {
        "id": 6,
        "jokeText": "Why did the golfer bring two pairs of pants? In case he got a hole in one.",
        "jokeType": "Sports",
    },
    {
        "id": 7,
        "jokeText": "Why did the cinema hire a ghost? To run the boo-x office.",
        "jokeType": "Movies",
    },
    {
        "id": 8,
        "jokeText": "What did the photon say when asked if it needed help with its luggage? No thanks, I'm travelling light.",
        "jokeType": "Science",
    },
    {
        "id": 9,
        "jokeText": "I'm reading a book about anti-gravity. It's impossible to put down.",
        "jokeType": "Puns",
    },
    {
        "id": 10,
        "jokeText": "Time flies like an arrow. Fruit flies like a banana.",
        "jokeType": "Wordplay",
    },
    {
        "id": 11,
        "jokeText": "Parallel lines have so much in common. It's a shame they'll never meet.",
        "jokeType": "Math",
    },
    {
        "id": 12,
        "jokeText": "Why did the tomato turn red? Because it saw the salad dressing.",
        "jokeType": "Food",
    },
    {
        "id": 13,
        "jokeText": "Why are basketball players messy eaters? They're always dribbling.",
        "jokeType": "Sports",
    },
    {
        "id": 14,
        "jokeText": "What's a pirate's favourite film genre? Arrrr-rated.",
        "jokeType": "Movies",
    },
]
