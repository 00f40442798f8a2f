import json, os
from typing import Dict, Generic, Iterator, List, Optional, TypeVar
from .models import Identity, User, Message, Community, DirectoryEntry
from ..utils.logger import setup_logger

logger = setup_logger('communitychat.repo')

T = TypeVar("T")

class JsonlStore(Generic[T]):
    """Ordered, durable key-value store backed by a JSONL file.

    Records are kept in memory keyed by text and written back to disk in
    key order after every mutation, so the file always mirrors the map.
    Subclasses define how a record maps to its key and to a JSON object.
    """

    def __init__(self, path: str):
        """Initialize store.

        Args:
            path (str): Path to JSONL file holding the records

        Side Effects:
            - Creates directory structure if not exists
            - Loads existing records from file
        """
        os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
        self.path = path
        self._records: Dict[str, T] = {}
        self._load()

    def _key(self, item: T) -> str:
        raise NotImplementedError

    def _to_record(self, item: T) -> dict:
        raise NotImplementedError

    def _from_record(self, rec: dict) -> T:
        raise NotImplementedError

    def _load(self):
        """Load records from JSONL file into memory.

        Side Effects:
            - Populates the in-memory map
        """
        if not os.path.exists(self.path):
            return
        with open(self.path, "r", encoding="utf-8") as f:
            for line in f:
                if not line.strip():
                    continue
                item = self._from_record(json.loads(line))
                self._records[self._key(item)] = item
        logger.debug(f"Loaded {len(self._records)} records from {self.path}")

    def _commit(self, records: Dict[str, T]):
        """Write ``records`` to the JSONL file in key order, then adopt them.

        The file is written to a sibling temp file and moved into place, so a
        failed write leaves both the file and the in-memory map untouched.

        Args:
            records (Dict[str, T]): Complete new contents of the store

        Side Effects:
            - Replaces file contents and fsyncs it
            - Replaces the in-memory map
        """
        tmp_path = self.path + ".tmp"
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                for key in sorted(records):
                    f.write(json.dumps(self._to_record(records[key]), ensure_ascii=False) + "\n")
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
        self._records = records
        logger.debug(f"Rewrote {self.path} with {len(records)} records")

    def get(self, key: str) -> Optional[T]:
        """Get a record by key.

        Args:
            key (str): Record key

        Returns:
            Optional[T]: Record if found, None otherwise
        """
        return self._records.get(key)

    def insert(self, item: T) -> Optional[T]:
        """Insert or replace a record under its key.

        Args:
            item (T): Record to store

        Returns:
            Optional[T]: Previous record stored under the same key, if any
        """
        key = self._key(item)
        previous = self._records.get(key)
        records = dict(self._records)
        records[key] = item
        self._commit(records)
        return previous

    def remove(self, key: str) -> Optional[T]:
        """Remove a record by key.

        Args:
            key (str): Record key

        Returns:
            Optional[T]: Removed record, or None if the key was absent
        """
        item = self._records.get(key)
        if item is not None:
            records = dict(self._records)
            del records[key]
            self._commit(records)
        return item

    def keys(self) -> List[str]:
        return sorted(self._records)

    def values(self) -> List[T]:
        """Get all records in key order."""
        return [self._records[key] for key in sorted(self._records)]

    def __contains__(self, key: str) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())


class UsersRepo(JsonlStore[User]):
    """Users keyed by username."""

    def _key(self, item: User) -> str:
        return item.username

    def _to_record(self, item: User) -> dict:
        return {
            "id": item.id.text,
            "username": item.username,
            "groups_created": list(item.groups_created),
            "created_at": item.created_at,
        }

    def _from_record(self, rec: dict) -> User:
        return User(
            id=Identity(rec["id"]),
            username=rec["username"],
            groups_created=list(rec.get("groups_created", [])),
            created_at=rec.get("created_at", 0),
        )


def _message_to_record(m: Message) -> dict:
    return {
        "id": m.id,
        "sender": m.sender.text,
        "message_text": m.message_text,
        "created_at": m.created_at,
    }

def _message_from_record(rec: dict) -> Message:
    return Message(
        id=rec["id"],
        sender=Identity(rec["sender"]),
        message_text=rec["message_text"],
        created_at=rec["created_at"],
    )


class CommunitiesRepo(JsonlStore[Community]):
    """Communities keyed by community name, messages stored inline."""

    def _key(self, item: Community) -> str:
        return item.name_of_community

    def _to_record(self, item: Community) -> dict:
        return {
            "id": item.id,
            "owner": item.owner.text,
            "name_of_community": item.name_of_community,
            "members": list(item.members),
            "messages": [_message_to_record(m) for m in item.messages],
            "created_at": item.created_at,
            "creator": item.creator,
        }

    def _from_record(self, rec: dict) -> Community:
        # Records written before the creator field existed load with creator=None
        return Community(
            id=rec["id"],
            owner=Identity(rec["owner"]),
            name_of_community=rec["name_of_community"],
            members=list(rec.get("members", [])),
            messages=[_message_from_record(m) for m in rec.get("messages", [])],
            created_at=rec.get("created_at", 0),
            creator=rec.get("creator"),
        )


class DirectoryRepo(JsonlStore[DirectoryEntry]):
    """Community directory entries keyed by community name."""

    def _key(self, item: DirectoryEntry) -> str:
        return item.name

    def _to_record(self, item: DirectoryEntry) -> dict:
        return {"name": item.name, "owner": item.owner.text}

    def _from_record(self, rec: dict) -> DirectoryEntry:
        return DirectoryEntry(name=rec["name"], owner=Identity(rec["owner"]))


class Stores:
    """The three stores the service reads and mutates.

    Built once at startup and handed to the service explicitly.

    Attributes:
        users (UsersRepo): Users keyed by username
        communities (CommunitiesRepo): Communities keyed by name
        directory (DirectoryRepo): Directory entries keyed by community name
    """

    def __init__(self, users: UsersRepo, communities: CommunitiesRepo, directory: DirectoryRepo):
        self.users = users
        self.communities = communities
        self.directory = directory

    @classmethod
    def open(cls, data_dir: str) -> "Stores":
        """Open (or create) the JSONL-backed stores under ``data_dir``."""
        return cls(
            users=UsersRepo(os.path.join(data_dir, "users.jsonl")),
            communities=CommunitiesRepo(os.path.join(data_dir, "communities.jsonl")),
            directory=DirectoryRepo(os.path.join(data_dir, "directory.jsonl")),
        )
