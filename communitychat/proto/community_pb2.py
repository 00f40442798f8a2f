# -*- coding: utf-8 -*-
# Protocol buffer module for community.proto.
#
# Mirrors community.proto message for message; test_proto.py checks the two
# against protoc's descriptor set whenever grpcio-tools is installed.
from google.protobuf import descriptor_pb2 as _descriptor_pb2
from google.protobuf import descriptor_pool as _descriptor_pool
from google.protobuf import symbol_database as _symbol_database
from google.protobuf.internal import builder as _builder

_sym_db = _symbol_database.Default()

_FieldProto = _descriptor_pb2.FieldDescriptorProto

_SCALARS = {
    "string": _FieldProto.TYPE_STRING,
    "uint64": _FieldProto.TYPE_UINT64,
}

# (message name, oneof name or None, [(field name, type)]), in .proto order.
# Field numbers follow list position; "repeated X" marks repeated fields and
# names starting with "." are message types.
_MESSAGES = [
    ("Error", None, [("tag", "string"), ("message", "string")]),
    ("TextResult", "result", [("ok", "string"), ("err", ".communitychat.Error")]),
    ("RegisterUserRequest", None, [("username", "string")]),
    ("CreateCommunityRequest", None, [("name_of_community", "string"),
                                      ("username_of_creator", "string")]),
    ("ListCommunitiesRequest", None, []),
    ("CommunitySummary", None, [("name", "string"), ("owner", "string")]),
    ("CommunityList", None, [("communities", "repeated .communitychat.CommunitySummary")]),
    ("ListCommunitiesResponse", "result", [("ok", ".communitychat.CommunityList"),
                                           ("err", ".communitychat.Error")]),
    ("DeleteCommunityRequest", None, [("name_of_community", "string"), ("owner", "string")]),
    ("JoinCommunityRequest", None, [("username", "string"), ("group_name", "string")]),
    ("ExitCommunityRequest", None, [("username", "string"), ("group_name", "string")]),
    ("RemoveUserRequest", None, [("name_of_community", "string"), ("owner", "string"),
                                 ("user", "string")]),
    ("SendMessageRequest", None, [("community_name", "string"), ("message_to_send", "string"),
                                  ("username", "string")]),
    ("ListMessagesRequest", None, [("username", "string"), ("groupname", "string")]),
    ("ChatMessage", None, [("id", "string"), ("sender", "string"), ("message_text", "string"),
                           ("created_at", "uint64")]),
    ("MessageList", None, [("messages", "repeated .communitychat.ChatMessage")]),
    ("ListMessagesResponse", "result", [("ok", ".communitychat.MessageList"),
                                        ("err", ".communitychat.Error")]),
]

_METHODS = [
    ("RegisterUser", "RegisterUserRequest", "TextResult"),
    ("CreateCommunity", "CreateCommunityRequest", "TextResult"),
    ("ListCommunities", "ListCommunitiesRequest", "ListCommunitiesResponse"),
    ("DeleteCommunity", "DeleteCommunityRequest", "TextResult"),
    ("JoinCommunity", "JoinCommunityRequest", "TextResult"),
    ("ExitCommunity", "ExitCommunityRequest", "TextResult"),
    ("RemoveUser", "RemoveUserRequest", "TextResult"),
    ("SendMessage", "SendMessageRequest", "TextResult"),
    ("ListMessages", "ListMessagesRequest", "ListMessagesResponse"),
]


def _file_descriptor_proto():
    fdp = _descriptor_pb2.FileDescriptorProto(
        name="community.proto", package="communitychat", syntax="proto3")
    for message_name, oneof, fields in _MESSAGES:
        msg = fdp.message_type.add(name=message_name)
        if oneof is not None:
            msg.oneof_decl.add(name=oneof)
        for number, (field_name, kind) in enumerate(fields, start=1):
            field = msg.field.add(name=field_name, number=number)
            if kind.startswith("repeated "):
                field.label = _FieldProto.LABEL_REPEATED
                kind = kind[len("repeated "):]
            else:
                field.label = _FieldProto.LABEL_OPTIONAL
            if kind.startswith("."):
                field.type = _FieldProto.TYPE_MESSAGE
                field.type_name = kind
            else:
                field.type = _SCALARS[kind]
            if oneof is not None:
                field.oneof_index = 0
    service = fdp.service.add(name="CommunityService")
    for method_name, input_type, output_type in _METHODS:
        service.method.add(
            name=method_name,
            input_type=f".communitychat.{input_type}",
            output_type=f".communitychat.{output_type}",
        )
    return fdp


DESCRIPTOR = _descriptor_pool.Default().AddSerializedFile(_file_descriptor_proto().SerializeToString())

_globals = globals()
_builder.BuildMessageAndEnumDescriptors(DESCRIPTOR, _globals)
_builder.BuildTopDescriptorsAndMessages(DESCRIPTOR, 'community_pb2', _globals)
