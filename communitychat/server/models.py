from dataclasses import dataclass, field
from typing import List, Optional

ANONYMOUS_PRINCIPAL = "2vxsx-fae"

@dataclass(frozen=True)
class Identity:
    """Opaque caller identity supplied by the hosting layer.

    Compared and hashed by value; the text is never interpreted.

    Attributes:
        text (str): Identity as handed over by the transport
    """
    text: str

    @classmethod
    def anonymous(cls) -> "Identity":
        return cls(ANONYMOUS_PRINCIPAL)

    def __str__(self):
        return self.text

@dataclass(frozen=True)
class Caller:
    """Who is calling and when, captured once per request.

    Attributes:
        identity (Identity): Caller's opaque identity
        time (int): Request timestamp in nanoseconds
    """
    identity: Identity
    time: int

@dataclass
class User:
    """Represents a registered user.

    Attributes:
        id (Identity): Identity of the caller that registered the username
        username (str): Unique username, also the store key
        groups_created (List[str]): Names of communities the user created
        created_at (int): Registration timestamp in nanoseconds
    """
    id: Identity
    username: str
    groups_created: List[str] = field(default_factory=list)
    created_at: int = 0

@dataclass(frozen=True)
class Message:
    """A message posted to a community. Never modified after it is appended.

    Attributes:
        id (str): Unique message identifier
        sender (Identity): Identity of the caller that sent it
        message_text (str): Content of the message
        created_at (int): Send timestamp in nanoseconds
    """
    id: str
    sender: Identity
    message_text: str
    created_at: int

@dataclass
class Community:
    """Represents a community with its members and message log.

    Attributes:
        id (str): Unique community identifier
        owner (Identity): Identity of the caller that created the community
        name_of_community (str): Unique community name, also the store key
        members (List[str]): Member usernames in join order, no duplicates
        messages (List[Message]): Messages in append order
        created_at (int): Creation timestamp in nanoseconds
        creator (Optional[str]): Username named as creator at creation time
    """
    id: str
    owner: Identity
    name_of_community: str
    members: List[str] = field(default_factory=list)
    messages: List[Message] = field(default_factory=list)
    created_at: int = 0
    creator: Optional[str] = None

    def is_member(self, username: str) -> bool:
        return username in self.members

@dataclass(frozen=True)
class DirectoryEntry:
    """Lightweight (name, owner) summary used for listing communities."""
    name: str
    owner: Identity
