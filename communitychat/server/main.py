import asyncio
from grpc import aio
from ..proto import community_pb2_grpc
from .service import CommunityService, logger  # Reuse the same logger
from .handlers import CommunityHandlers
from .repo import Stores
from ..utils.config import settings

async def serve(host=None, port=None, data_dir=None):
    """Start the community chat server.

    Sets up and runs the gRPC server backed by the users, communities
    and directory stores.

    Args:
        host (str): Hostname to bind server to. Defaults to settings.host.
        port (int): Port number to listen on. Defaults to settings.port.
        data_dir (str): Directory for the JSONL stores. Defaults to settings.data_dir.

    Side Effects:
        - Creates data directories if needed
        - Starts gRPC server
        - Logs server startup progress
    """
    host = host or settings.host
    port = port or settings.port
    stores = Stores.open(data_dir or settings.data_dir)
    logger.info(f"Loaded {len(stores.users)} users and {len(stores.communities)} communities")

    server = aio.server()
    community_pb2_grpc.add_CommunityServiceServicer_to_server(
        CommunityService(CommunityHandlers(stores)), server)
    listen_addr = f"{host}:{port}"
    server.add_insecure_port(listen_addr)
    logger.info(f"Server starting, listening on {listen_addr}")
    await server.start()
    logger.info(f"Server is now running on {listen_addr}")
    await server.wait_for_termination()

def run():
    """Console entry point."""
    asyncio.run(serve())

if __name__ == "__main__":
    run()
