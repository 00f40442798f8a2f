import asyncio
from dataclasses import dataclass
from typing import Any
import typer
import grpc
from grpc import aio
from ..proto import community_pb2, community_pb2_grpc
from ..utils.config import CALLER_METADATA_KEY, settings

app = typer.Typer(help="Community chat client")

@dataclass
class Connection:
    host: str
    port: int
    caller: str

async def call_rpc(conn: Connection, rpc: str, request):
    """Invoke one RPC through the generated stub.

    Args:
        conn (Connection): Server address and caller identity
        rpc (str): RPC name, e.g. "RegisterUser"
        request: Request message for that RPC

    Returns:
        Response message whose ``result`` oneof is either ``ok`` or ``err``
    """
    metadata = ((CALLER_METADATA_KEY, conn.caller),) if conn.caller else None
    async with aio.insecure_channel(f"{conn.host}:{conn.port}") as chan:
        stub = community_pb2_grpc.CommunityServiceStub(chan)
        return await getattr(stub, rpc)(request, metadata=metadata)

def format_message(m: community_pb2.ChatMessage) -> str:
    return f"[{m.created_at}] {m.sender}: {m.message_text}"

def _invoke(ctx: typer.Context, rpc: str, request) -> Any:
    """Run an RPC, print errors and exit non-zero on err, else return the ok value."""
    conn: Connection = ctx.obj
    try:
        resp = asyncio.run(call_rpc(conn, rpc, request))
    except grpc.aio.AioRpcError as e:
        typer.echo(f"[error] RPC failed: {e.code().name} {e.details()}", err=True)
        raise typer.Exit(2)
    if resp.WhichOneof("result") == "err":
        typer.echo(f"[error] {resp.err.tag}: {resp.err.message}", err=True)
        raise typer.Exit(1)
    return resp.ok

@app.callback()
def main(
    ctx: typer.Context,
    host: str = typer.Option(settings.host, help="Server hostname"),
    port: int = typer.Option(settings.port, help="Server port"),
    caller: str = typer.Option("", help="Caller identity sent with every request"),
):
    """Talk to a community chat server."""
    ctx.obj = Connection(host=host, port=port, caller=caller)

@app.command("register")
def register_cmd(ctx: typer.Context, username: str):
    """Register a new username."""
    typer.echo(_invoke(ctx, "RegisterUser", community_pb2.RegisterUserRequest(username=username)))

@app.command("create")
def create_cmd(ctx: typer.Context, community: str, creator: str):
    """Create a community with CREATOR as its first member."""
    typer.echo(_invoke(ctx, "CreateCommunity", community_pb2.CreateCommunityRequest(
        name_of_community=community, username_of_creator=creator)))

@app.command("communities")
def communities_cmd(ctx: typer.Context):
    """List all communities."""
    entries = _invoke(ctx, "ListCommunities", community_pb2.ListCommunitiesRequest()).communities
    if not entries:
        typer.echo("No communities found")
        return
    for e in entries:
        typer.echo(f" - {e.name} owner={e.owner}")

@app.command("delete")
def delete_cmd(ctx: typer.Context, community: str, owner: str):
    """Delete a community; OWNER must match the stored owner identity."""
    typer.echo(_invoke(ctx, "DeleteCommunity", community_pb2.DeleteCommunityRequest(
        name_of_community=community, owner=owner)))

@app.command("join")
def join_cmd(ctx: typer.Context, username: str, community: str):
    typer.echo(_invoke(ctx, "JoinCommunity", community_pb2.JoinCommunityRequest(
        username=username, group_name=community)))

@app.command("exit")
def exit_cmd(ctx: typer.Context, username: str, community: str):
    typer.echo(_invoke(ctx, "ExitCommunity", community_pb2.ExitCommunityRequest(
        username=username, group_name=community)))

@app.command("remove-user")
def remove_user_cmd(ctx: typer.Context, community: str, owner: str, user: str):
    """Remove USER from a community; OWNER must match the stored owner identity."""
    typer.echo(_invoke(ctx, "RemoveUser", community_pb2.RemoveUserRequest(
        name_of_community=community, owner=owner, user=user)))

@app.command("send")
def send_cmd(ctx: typer.Context, community: str, text: str, username: str):
    """Send TEXT to a community as USERNAME."""
    typer.echo(_invoke(ctx, "SendMessage", community_pb2.SendMessageRequest(
        community_name=community, message_to_send=text, username=username)))

@app.command("messages")
def messages_cmd(ctx: typer.Context, username: str, community: str):
    """Show every message of a community, oldest first."""
    messages = _invoke(ctx, "ListMessages", community_pb2.ListMessagesRequest(
        username=username, groupname=community)).messages
    if not messages:
        typer.echo("No messages yet")
        return
    for m in messages:
        typer.echo(format_message(m))

if __name__ == "__main__":
    app()
