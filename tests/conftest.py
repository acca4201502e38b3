import copy

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from toy_house.database.mongo import get_toy_collection
from toy_house.main import create_app


def _matches(doc, query):
    return all(doc.get(key) == value for key, value in (query or {}).items())


def _project(doc, projection):
    if not projection:
        return doc
    keep = {key for key, flag in projection.items() if flag}
    keep.add("_id")
    return {key: value for key, value in doc.items() if key in keep}


class FakeCursor:
    def __init__(self, docs):
        self.docs = docs

    async def to_list(self, length=None):
        return self.docs if length is None else self.docs[:length]


class FakeToyCollection:
    """In-memory stand-in for the Motor collection, recording every call."""

    def __init__(self):
        self.docs = []
        self.calls = []
        self.fail = False

    def _record(self, name):
        self.calls.append(name)
        if self.fail:
            raise PyMongoError("connection refused")

    def seed(self, **fields):
        doc = {"_id": ObjectId(), **fields}
        self.docs.append(doc)
        return doc["_id"]

    def find(self, query=None):
        self._record("find")
        return FakeCursor([copy.deepcopy(d) for d in self.docs if _matches(d, query)])

    async def find_one(self, query, projection=None):
        self._record("find_one")
        for doc in self.docs:
            if _matches(doc, query):
                return _project(copy.deepcopy(doc), projection)
        return None

    async def insert_one(self, doc):
        self._record("insert_one")
        stored = copy.deepcopy(doc)
        stored["_id"] = ObjectId()
        self.docs.append(stored)
        return InsertOneResult(stored["_id"], True)

    async def update_one(self, query, update):
        self._record("update_one")
        for doc in self.docs:
            if _matches(doc, query):
                changes = update["$set"]
                modified = any(doc.get(k) != v for k, v in changes.items())
                doc.update(changes)
                return UpdateResult({"n": 1, "nModified": int(modified)}, True)
        return UpdateResult({"n": 0, "nModified": 0}, True)

    async def delete_one(self, query):
        self._record("delete_one")
        for i, doc in enumerate(self.docs):
            if _matches(doc, query):
                del self.docs[i]
                return DeleteResult({"n": 1}, True)
        return DeleteResult({"n": 0}, True)


@pytest.fixture
def toys():
    return FakeToyCollection()


@pytest.fixture
def client(toys):
    app = create_app()
    app.dependency_overrides[get_toy_collection] = lambda: toys
    return TestClient(app)


@pytest.fixture
def toy_payload():
    return {
        "pictureUrl": "https://example.com/robot.png",
        "name": "Robo Rex",
        "sellerName": "Ada",
        "sellerEmail": "seller@example.com",
        "subCategory": "robots",
        "price": 24.99,
        "rating": 4.5,
        "availableQuantity": 7,
        "detailDescription": "Walking dinosaur robot with lights.",
    }
