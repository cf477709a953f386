from datetime import datetime

genres_data = [
    {"name": "Action"},
    {"name": "Comedy"},
    {"name": "Drama"},
    {"name": "Fantasy"},
    {"name": "Horror"},
]

movies_data = [
    {
        "title": "Inception",
        "description": "A dream within a dream",
        "releaseDate": datetime(2010, 7, 16),
        "genre": ["Action", "Drama"],
    },
    {
        "title": "Shrek",
        "description": "An ogre and a donkey go on an adventure",
        "releaseDate": datetime(2001, 5, 18),
        "genre": ["Comedy", "Fantasy"],
    },
    {
        "title": "The Dark Knight",
        "description": "A bat fights a clown",
        "releaseDate": datetime(2008, 7, 18),
        "genre": ["Action", "Drama"],
    },
    {
        "title": "Parasite",
        "description": "Social inequality explored",
        "releaseDate": datetime(2019, 5, 30),
        "genre": ["Drama", "Comedy"],
    },
    {
        "title": "The Exorcist",
        "description": "Scary movie about an exorcism",
        "releaseDate": datetime(1973, 12, 26),
        "genre": ["Horror", "Drama"],
    },
]
