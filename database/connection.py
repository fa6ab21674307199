from motor.motor_asyncio import AsyncIOMotorClient
from config import mongodb_uri, DATABASE_NAME

#connect database
client = AsyncIOMotorClient(mongodb_uri)
db = client.get_database(DATABASE_NAME)
