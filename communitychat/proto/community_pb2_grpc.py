# Client and server classes corresponding to protobuf-defined services.
# Matches grpc_tools.protoc output for community.proto, with a relative import.
import grpc

from . import community_pb2 as community__pb2


class CommunityServiceStub(object):
    """Missing associated documentation comment in .proto file."""

    def __init__(self, channel):
        """Constructor.

        Args:
            channel: A grpc.Channel.
        """
        self.RegisterUser = channel.unary_unary(
                '/communitychat.CommunityService/RegisterUser',
                request_serializer=community__pb2.RegisterUserRequest.SerializeToString,
                response_deserializer=community__pb2.TextResult.FromString,
                )
        self.CreateCommunity = channel.unary_unary(
                '/communitychat.CommunityService/CreateCommunity',
                request_serializer=community__pb2.CreateCommunityRequest.SerializeToString,
                response_deserializer=community__pb2.TextResult.FromString,
                )
        self.ListCommunities = channel.unary_unary(
                '/communitychat.CommunityService/ListCommunities',
                request_serializer=community__pb2.ListCommunitiesRequest.SerializeToString,
                response_deserializer=community__pb2.ListCommunitiesResponse.FromString,
                )
        self.DeleteCommunity = channel.unary_unary(
                '/communitychat.CommunityService/DeleteCommunity',
                request_serializer=community__pb2.DeleteCommunityRequest.SerializeToString,
                response_deserializer=community__pb2.TextResult.FromString,
                )
        self.JoinCommunity = channel.unary_unary(
                '/communitychat.CommunityService/JoinCommunity',
                request_serializer=community__pb2.JoinCommunityRequest.SerializeToString,
                response_deserializer=community__pb2.TextResult.FromString,
                )
        self.ExitCommunity = channel.unary_unary(
                '/communitychat.CommunityService/ExitCommunity',
                request_serializer=community__pb2.ExitCommunityRequest.SerializeToString,
                response_deserializer=community__pb2.TextResult.FromString,
                )
        self.RemoveUser = channel.unary_unary(
                '/communitychat.CommunityService/RemoveUser',
                request_serializer=community__pb2.RemoveUserRequest.SerializeToString,
                response_deserializer=community__pb2.TextResult.FromString,
                )
        self.SendMessage = channel.unary_unary(
                '/communitychat.CommunityService/SendMessage',
                request_serializer=community__pb2.SendMessageRequest.SerializeToString,
                response_deserializer=community__pb2.TextResult.FromString,
                )
        self.ListMessages = channel.unary_unary(
                '/communitychat.CommunityService/ListMessages',
                request_serializer=community__pb2.ListMessagesRequest.SerializeToString,
                response_deserializer=community__pb2.ListMessagesResponse.FromString,
                )


class CommunityServiceServicer(object):
    """Missing associated documentation comment in .proto file."""

    def RegisterUser(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')

    def CreateCommunity(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')

    def ListCommunities(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')

    def DeleteCommunity(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')

    def JoinCommunity(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')

    def ExitCommunity(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')

    def RemoveUser(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')

    def SendMessage(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')

    def ListMessages(self, request, context):
        """Missing associated documentation comment in .proto file."""
        context.set_code(grpc.StatusCode.UNIMPLEMENTED)
        context.set_details('Method not implemented!')
        raise NotImplementedError('Method not implemented!')


def add_CommunityServiceServicer_to_server(servicer, server):
    rpc_method_handlers = {
            'RegisterUser': grpc.unary_unary_rpc_method_handler(
                    servicer.RegisterUser,
                    request_deserializer=community__pb2.RegisterUserRequest.FromString,
                    response_serializer=community__pb2.TextResult.SerializeToString,
            ),
            'CreateCommunity': grpc.unary_unary_rpc_method_handler(
                    servicer.CreateCommunity,
                    request_deserializer=community__pb2.CreateCommunityRequest.FromString,
                    response_serializer=community__pb2.TextResult.SerializeToString,
            ),
            'ListCommunities': grpc.unary_unary_rpc_method_handler(
                    servicer.ListCommunities,
                    request_deserializer=community__pb2.ListCommunitiesRequest.FromString,
                    response_serializer=community__pb2.ListCommunitiesResponse.SerializeToString,
            ),
            'DeleteCommunity': grpc.unary_unary_rpc_method_handler(
                    servicer.DeleteCommunity,
                    request_deserializer=community__pb2.DeleteCommunityRequest.FromString,
                    response_serializer=community__pb2.TextResult.SerializeToString,
            ),
            'JoinCommunity': grpc.unary_unary_rpc_method_handler(
                    servicer.JoinCommunity,
                    request_deserializer=community__pb2.JoinCommunityRequest.FromString,
                    response_serializer=community__pb2.TextResult.SerializeToString,
            ),
            'ExitCommunity': grpc.unary_unary_rpc_method_handler(
                    servicer.ExitCommunity,
                    request_deserializer=community__pb2.ExitCommunityRequest.FromString,
                    response_serializer=community__pb2.TextResult.SerializeToString,
            ),
            'RemoveUser': grpc.unary_unary_rpc_method_handler(
                    servicer.RemoveUser,
                    request_deserializer=community__pb2.RemoveUserRequest.FromString,
                    response_serializer=community__pb2.TextResult.SerializeToString,
            ),
            'SendMessage': grpc.unary_unary_rpc_method_handler(
                    servicer.SendMessage,
                    request_deserializer=community__pb2.SendMessageRequest.FromString,
                    response_serializer=community__pb2.TextResult.SerializeToString,
            ),
            'ListMessages': grpc.unary_unary_rpc_method_handler(
                    servicer.ListMessages,
                    request_deserializer=community__pb2.ListMessagesRequest.FromString,
                    response_serializer=community__pb2.ListMessagesResponse.SerializeToString,
            ),
    }
    generic_handler = grpc.method_handlers_generic_handler(
            'communitychat.CommunityService', rpc_method_handlers)
    server.add_generic_rpc_handlers((generic_handler,))
