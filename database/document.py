from typing import Any, Dict, List, Optional

from pymongo import ReturnDocument

from database.connection import db


class Document:
    """
    Lớp bọc mỏng quanh một collection motor.

    Lớp con đặt `collection_name`. Instance là bản ghi chưa lưu, tạo từ
    keyword fields; các classmethod truy vấn collection và trả về dict
    thường để handler serialize.
    """

    collection_name: str = ""

    def __init__(self, **fields: Any):
        self.data: Dict[str, Any] = dict(fields)

    @classmethod
    def collection(cls):
        return db[cls.collection_name]

    @classmethod
    async def get_next_id_from_max(cls) -> int:
        """Sinh ID mới dựa trên max _id hiện có"""
        last = await cls.collection().find_one(sort=[("_id", -1)])
        return (last["_id"] + 1) if last and "_id" in last else 1

    async def save(self) -> Dict[str, Any]:
        if "_id" not in self.data:
            self.data["_id"] = await self.get_next_id_from_max()
        await self.collection().insert_one(self.data)
        return dict(self.data)

    @classmethod
    async def find_one(cls, filter: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        return await cls.collection().find_one(filter)

    @classmethod
    async def find(cls, filter: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        docs = []
        async for doc in cls.collection().find(filter or {}):
            docs.append(doc)
        return docs

    @classmethod
    async def find_by_id_and_update(cls, doc_id: int, patch: Dict[str, Any], new: bool = True) -> Optional[Dict[str, Any]]:
        # new=True trả về document sau khi $set
        return await cls.collection().find_one_and_update(
            {"_id": doc_id},
            {"$set": patch},
            return_document=ReturnDocument.AFTER if new else ReturnDocument.BEFORE,
        )

    @classmethod
    async def find_by_id_and_delete(cls, doc_id: int) -> Optional[Dict[str, Any]]:
        return await cls.collection().find_one_and_delete({"_id": doc_id})
