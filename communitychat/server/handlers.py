from dataclasses import replace
from typing import Callable, List, Optional
from .models import Caller, Identity, User, Community, DirectoryEntry, Message
from .repo import Stores
from .errors import (
    CredentialsMissing, UsernameRequired, UserDoesNotExist, CommunityDoesNotExist,
    UserAlreadyExists, CommunityAlreadyExists, AlreadyAMember, OnlyOwnerCanDelete,
    NotAMemberOfGroup,
)
from .ids import new_id
from ..utils.logger import setup_logger

logger = setup_logger('communitychat.handlers')

class CommunityHandlers:
    """Validation and mutation handlers for every community chat operation.

    Each handler validates the payload against the stores first and only
    then writes, so a rejected request leaves no partial state behind.
    Failures are raised as ``CommunityAppError`` subclasses.

    The handlers assume mutating calls are serialized by whoever hosts them.
    """

    def __init__(self, stores: Stores, id_factory: Callable[[], str] = new_id):
        """Initialize handlers.

        Args:
            stores (Stores): Users, communities and directory stores
            id_factory (Callable[[], str]): Produces ids for new communities
                and messages. Defaults to random UUIDs.
        """
        self.stores = stores
        self.new_id = id_factory

    # Lookups shared by several handlers

    def _require_user(self, username: str, message: Optional[str] = None) -> User:
        user = self.stores.users.get(username) if username else None
        if user is None:
            raise UserDoesNotExist(message or f"user with {username} does not exist")
        return user

    def _require_community(self, name: str) -> Community:
        community = self.stores.communities.get(name)
        if community is None:
            raise CommunityDoesNotExist(f"community {name} does not exist")
        return community

    @staticmethod
    def _require_owner(community: Community, owner: Identity, message: str):
        if community.owner != owner:
            raise OnlyOwnerCanDelete(message)

    @staticmethod
    def _require_member(community: Community, username: str, message: str):
        if not community.is_member(username):
            raise NotAMemberOfGroup(message)

    def register_user(self, caller: Caller, username: str) -> str:
        """Register a new username.

        Args:
            caller (Caller): Identity and time of the request
            username (str): Desired unique username

        Returns:
            str: Confirmation text

        Raises:
            UsernameRequired: If username is empty
            UserAlreadyExists: If username is taken
        """
        if not username:
            raise UsernameRequired("username is required")
        if username in self.stores.users:
            raise UserAlreadyExists("username is already taken try another one")

        self.stores.users.insert(User(
            id=caller.identity,
            username=username,
            groups_created=[],
            created_at=caller.time,
        ))
        logger.info(f"RegisterUser: '{username}' registered by {caller.identity}")
        return f"user with {username} has been created successfully"

    def create_community(self, caller: Caller, name_of_community: str, username_of_creator: str) -> str:
        """Create a community with the named user as its first member.

        The owner recorded is the caller's identity, which need not be the
        identity that registered ``username_of_creator``.

        Args:
            caller (Caller): Identity and time of the request
            name_of_community (str): Unique community name
            username_of_creator (str): Registered username to seed membership

        Returns:
            str: Confirmation text

        Raises:
            CredentialsMissing: If the community name is empty
            CommunityAlreadyExists: If the name is taken
            UserDoesNotExist: If the creator is not registered

        Side Effects:
            - Inserts the community and its directory entry
            - Appends the name to the creator's groups_created
        """
        if not name_of_community:
            raise CredentialsMissing("community name is missing")
        if name_of_community in self.stores.communities:
            raise CommunityAlreadyExists(f"community with {name_of_community} already exists")
        creator = self._require_user(
            username_of_creator, f"user with {username_of_creator} is not registered")

        community = Community(
            id=self.new_id(),
            owner=caller.identity,
            name_of_community=name_of_community,
            members=[username_of_creator],
            messages=[],
            created_at=caller.time,
            creator=username_of_creator,
        )
        self.stores.communities.insert(community)
        self.stores.directory.insert(DirectoryEntry(name=name_of_community, owner=caller.identity))
        self.stores.users.insert(replace(
            creator, groups_created=creator.groups_created + [name_of_community]))
        logger.info(f"CreateCommunity: '{name_of_community}' created by '{username_of_creator}' "
                    f"owner {caller.identity}")
        return f"{name_of_community} community has been created successfully"

    def list_communities(self) -> List[DirectoryEntry]:
        """All directory entries in name order."""
        return self.stores.directory.values()

    def delete_community(self, caller: Caller, name_of_community: str, owner: Optional[Identity]) -> str:
        """Delete a community on behalf of its owner.

        Args:
            caller (Caller): Identity and time of the request
            name_of_community (str): Community to delete
            owner (Identity): Claimed owner identity

        Returns:
            str: Confirmation text

        Raises:
            CredentialsMissing: If the name or owner is empty
            CommunityDoesNotExist: If the community is unknown
            OnlyOwnerCanDelete: If owner differs from the stored owner

        Side Effects:
            - Removes the community and its directory entry
            - Drops the name from the creator's groups_created
        """
        if not name_of_community or owner is None or not owner.text:
            raise CredentialsMissing("some credentials are missing")
        community = self._require_community(name_of_community)
        self._require_owner(community, owner, "only owner can delete the community")

        self.stores.communities.remove(name_of_community)
        self.stores.directory.remove(name_of_community)

        # Legacy records carry no creator; the first member is the best guess
        creator_name = community.creator
        if creator_name is None and community.members:
            creator_name = community.members[0]
        creator = self.stores.users.get(creator_name) if creator_name else None
        if creator is not None and name_of_community in creator.groups_created:
            self.stores.users.insert(replace(
                creator,
                groups_created=[g for g in creator.groups_created if g != name_of_community],
            ))
        logger.info(f"DeleteCommunity: '{name_of_community}' deleted by {caller.identity}")
        return f"{name_of_community} has been successfully deleted"

    def join_community(self, caller: Caller, username: str, group_name: str) -> str:
        """Add a registered user to a community.

        Raises:
            CredentialsMissing, UserDoesNotExist, CommunityDoesNotExist, AlreadyAMember
        """
        if not group_name or not username:
            raise CredentialsMissing("some credentials are missing")
        self._require_user(username)
        community = self._require_community(group_name)
        if community.is_member(username):
            raise AlreadyAMember(f"{username} is already a member of {group_name}")

        self.stores.communities.insert(replace(community, members=community.members + [username]))
        logger.info(f"JoinCommunity: '{username}' joined '{group_name}' (caller {caller.identity})")
        return f"successfully joined {group_name} community"

    def exit_community(self, caller: Caller, username: str, group_name: str) -> str:
        """Remove a user from a community at their own request.

        An owner leaving is not treated specially; ownership stays put.

        Raises:
            CredentialsMissing, UserDoesNotExist, CommunityDoesNotExist, NotAMemberOfGroup
        """
        if not group_name or not username:
            raise CredentialsMissing("some credentials are missing")
        self._require_user(username)
        community = self._require_community(group_name)
        self._require_member(community, username,
                             f"user with {username} is not a member of the community group")

        self.stores.communities.insert(replace(
            community, members=[m for m in community.members if m != username]))
        logger.info(f"ExitCommunity: '{username}' left '{group_name}' (caller {caller.identity})")
        return "successfully exited the group"

    def remove_user(self, caller: Caller, name_of_community: str, owner: Optional[Identity], user: str) -> str:
        """Remove a member from a community on behalf of its owner.

        The owner may remove anyone, including the creator, and may leave
        the community without members.

        Raises:
            CredentialsMissing, CommunityDoesNotExist, OnlyOwnerCanDelete,
            UserDoesNotExist, NotAMemberOfGroup
        """
        if not name_of_community or owner is None or not owner.text or not user:
            raise CredentialsMissing("some credentials are missing")
        community = self._require_community(name_of_community)
        self._require_owner(community, owner, "only owner can remove users")
        self._require_user(user)
        self._require_member(community, user, f"user with {user} is not a member of the group")

        self.stores.communities.insert(replace(
            community, members=[m for m in community.members if m != user]))
        logger.info(f"RemoveUser: '{user}' removed from '{name_of_community}' by {caller.identity}")
        return f"successfully removed {user}"

    def send_message(self, caller: Caller, community_name: str, message_to_send: str, username: str) -> str:
        """Append a message to a community's log.

        Args:
            caller (Caller): Identity and time of the request; becomes the
                message sender and timestamp
            community_name (str): Target community
            message_to_send (str): Message text
            username (str): Registered member sending the message

        Returns:
            str: Confirmation text

        Raises:
            CredentialsMissing: If community name or text is empty
            CommunityDoesNotExist: If the community is unknown
            UserDoesNotExist: If the sender is not registered
            NotAMemberOfGroup: If the sender is not a member
        """
        if not community_name or not message_to_send:
            raise CredentialsMissing("missing credentials")
        community = self._require_community(community_name)
        self._require_user(
            username, "you must be registered in order to send messages to the community")
        self._require_member(community, username,
                             f"user with {username} not a member of the group")

        message = Message(
            id=self.new_id(),
            sender=caller.identity,
            message_text=message_to_send,
            created_at=caller.time,
        )
        self.stores.communities.insert(replace(community, messages=community.messages + [message]))
        logger.info(f"SendMessage: '{username}' posted {message.id} to '{community_name}'")
        return "message sent successfully"

    def list_messages(self, caller: Caller, username: str, group_name: str) -> List[Message]:
        """All messages of a community in append order, for a member.

        Raises:
            CredentialsMissing, UserDoesNotExist, CommunityDoesNotExist, NotAMemberOfGroup
        """
        if not group_name or not username:
            raise CredentialsMissing("some credentials are missing")
        self._require_user(username)
        community = self._require_community(group_name)
        self._require_member(community, username, "you are not a member of the group")
        logger.debug(f"ListMessages: {len(community.messages)} messages of '{group_name}' "
                     f"read by '{username}' (caller {caller.identity})")
        return list(community.messages)
