# api/schemas/genre.py
from pydantic import BaseModel

class GenreCount(BaseModel):
    count: int
