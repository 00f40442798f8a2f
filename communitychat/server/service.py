import asyncio, time, grpc
from grpc import aio
from typing import Callable, List, Optional
from ..proto import community_pb2, community_pb2_grpc
from .handlers import CommunityHandlers
from .models import Caller, Identity, Message, DirectoryEntry
from .errors import CommunityAppError
from ..utils.config import CALLER_METADATA_KEY
from ..utils.logger import setup_logger

logger = setup_logger('communitychat.server')

def message_to_proto(m: Message) -> community_pb2.ChatMessage:
    return community_pb2.ChatMessage(
        id=m.id,
        sender=m.sender.text,
        message_text=m.message_text,
        created_at=m.created_at,
    )

def directory_entry_to_proto(e: DirectoryEntry) -> community_pb2.CommunitySummary:
    return community_pb2.CommunitySummary(name=e.name, owner=e.owner.text)

def caller_from_context(context: Optional[aio.ServicerContext]) -> Caller:
    """Build the request's Caller from invocation metadata and the clock.

    Requests without an ``x-caller-identity`` entry, or with no context at
    all, are attributed to the anonymous identity.
    """
    identity = Identity.anonymous()
    if context is not None:
        for key, value in context.invocation_metadata() or ():
            if key == CALLER_METADATA_KEY and value:
                identity = Identity(value)
                break
    return Caller(identity=identity, time=time.time_ns())


class CommunityService(community_pb2_grpc.CommunityServiceServicer):
    """gRPC service implementation for community chat.

    Business failures are returned in-band through the ``err`` arm of each
    response's ``result`` oneof; the gRPC status is only used for requests
    that cannot be processed at all.
    """

    def __init__(self, handlers: CommunityHandlers):
        """Initialize chat service.

        Args:
            handlers (CommunityHandlers): Operation handlers bound to the stores

        Attributes:
            handlers: Handler instance
            mutation_lock: Serializes every RPC that writes to the stores
        """
        self.handlers = handlers
        self.mutation_lock = asyncio.Lock()

    async def _fields(self, request, context, *names: str) -> List[str]:
        """Pull text fields out of a request, aborting on text that is not valid Unicode."""
        values = []
        for name in names:
            value = getattr(request, name) or ""
            try:
                value.encode("utf-8")
            except UnicodeEncodeError:
                logger.error(f"Rejected request: field '{name}' is not valid UTF-8 text")
                await context.abort(grpc.StatusCode.INVALID_ARGUMENT, f"field '{name}' must be valid UTF-8 text")
            values.append(value)
        return values

    def _run(self, rpc: str, response_cls, fn: Callable, *args, to_ok: Callable = lambda v: v):
        try:
            result = fn(*args)
        except CommunityAppError as e:
            logger.warning(f"{rpc}: rejected with {e.tag}: {e.message}")
            return response_cls(err=community_pb2.Error(tag=e.tag, message=e.message))
        return response_cls(ok=to_ok(result))

    async def _mutate(self, rpc: str, fn: Callable, *args) -> community_pb2.TextResult:
        async with self.mutation_lock:
            return self._run(rpc, community_pb2.TextResult, fn, *args)

    async def RegisterUser(self, request: community_pb2.RegisterUserRequest, context: aio.ServicerContext):
        """Register a username for the calling identity.

        Returns:
            TextResult: Confirmation text, or UsernameRequired / UserAlreadyExists
        """
        username, = await self._fields(request, context, "username")
        return await self._mutate("RegisterUser", self.handlers.register_user,
                                  caller_from_context(context), username)

    async def CreateCommunity(self, request: community_pb2.CreateCommunityRequest, context: aio.ServicerContext):
        """Create a community owned by the calling identity."""
        name, creator = await self._fields(request, context, "name_of_community", "username_of_creator")
        return await self._mutate("CreateCommunity", self.handlers.create_community,
                                  caller_from_context(context), name, creator)

    async def ListCommunities(self, request: community_pb2.ListCommunitiesRequest, context: aio.ServicerContext):
        """List every community as (name, owner), in name order."""
        return self._run(
            "ListCommunities", community_pb2.ListCommunitiesResponse, self.handlers.list_communities,
            to_ok=lambda entries: community_pb2.CommunityList(
                communities=[directory_entry_to_proto(e) for e in entries]))

    async def DeleteCommunity(self, request: community_pb2.DeleteCommunityRequest, context: aio.ServicerContext):
        name, owner = await self._fields(request, context, "name_of_community", "owner")
        return await self._mutate("DeleteCommunity", self.handlers.delete_community,
                                  caller_from_context(context), name, Identity(owner) if owner else None)

    async def JoinCommunity(self, request: community_pb2.JoinCommunityRequest, context: aio.ServicerContext):
        username, group = await self._fields(request, context, "username", "group_name")
        return await self._mutate("JoinCommunity", self.handlers.join_community,
                                  caller_from_context(context), username, group)

    async def ExitCommunity(self, request: community_pb2.ExitCommunityRequest, context: aio.ServicerContext):
        username, group = await self._fields(request, context, "username", "group_name")
        return await self._mutate("ExitCommunity", self.handlers.exit_community,
                                  caller_from_context(context), username, group)

    async def RemoveUser(self, request: community_pb2.RemoveUserRequest, context: aio.ServicerContext):
        name, owner, user = await self._fields(request, context, "name_of_community", "owner", "user")
        return await self._mutate("RemoveUser", self.handlers.remove_user,
                                  caller_from_context(context), name,
                                  Identity(owner) if owner else None, user)

    async def SendMessage(self, request: community_pb2.SendMessageRequest, context: aio.ServicerContext):
        name, text, username = await self._fields(
            request, context, "community_name", "message_to_send", "username")
        return await self._mutate("SendMessage", self.handlers.send_message,
                                  caller_from_context(context), name, text, username)

    async def ListMessages(self, request: community_pb2.ListMessagesRequest, context: aio.ServicerContext):
        """Return a community's messages in append order to one of its members.

        Returns:
            ListMessagesResponse: MessageList, or a tagged error
        """
        username, group = await self._fields(request, context, "username", "groupname")
        return self._run(
            "ListMessages", community_pb2.ListMessagesResponse, self.handlers.list_messages,
            caller_from_context(context), username, group,
            to_ok=lambda messages: community_pb2.MessageList(
                messages=[message_to_proto(m) for m in messages]))
