import unittest
import os
import tempfile
import shutil
from google.protobuf import descriptor_pb2
from communitychat.proto import community_pb2, community_pb2_grpc

try:
    from grpc_tools import protoc
except ImportError:
    protoc = None

PROTO_DIR = os.path.dirname(os.path.abspath(__file__))

def shape(fdp):
    """The parts of a file descriptor that affect the wire and the service."""
    messages = {}
    for msg in fdp.message_type:
        fields = [(f.name, f.number, f.type, f.label, f.type_name, f.HasField("oneof_index"))
                  for f in msg.field]
        messages[msg.name] = (fields, [o.name for o in msg.oneof_decl])
    methods = [(m.name, m.input_type, m.output_type)
               for s in fdp.service for m in s.method]
    return fdp.package, messages, methods

class TestProto(unittest.TestCase):
    def test_result_oneof(self):
        ok = community_pb2.TextResult(ok="done")
        self.assertEqual(ok.WhichOneof("result"), "ok")
        err = community_pb2.TextResult(ok="done", err=community_pb2.Error(tag="T", message="m"))
        self.assertEqual(err.WhichOneof("result"), "err")
        self.assertEqual(community_pb2.TextResult().WhichOneof("result"), None)

    def test_service_has_every_rpc(self):
        service = community_pb2.DESCRIPTOR.services_by_name["CommunityService"]
        names = [m.name for m in service.methods]
        self.assertEqual(len(names), 9)
        for name in names:
            self.assertTrue(hasattr(community_pb2_grpc.CommunityServiceServicer, name))

    @unittest.skipUnless(protoc, "grpcio-tools not installed")
    def test_module_matches_proto_file(self):
        temp_dir = tempfile.mkdtemp()
        try:
            out = os.path.join(temp_dir, "community.pb")
            code = protoc.main(["protoc", f"-I{PROTO_DIR}",
                                f"--descriptor_set_out={out}", "community.proto"])
            self.assertEqual(code, 0)
            with open(out, "rb") as f:
                expected = descriptor_pb2.FileDescriptorSet.FromString(f.read()).file[0]
        finally:
            shutil.rmtree(temp_dir, ignore_errors=True)

        actual = descriptor_pb2.FileDescriptorProto()
        community_pb2.DESCRIPTOR.CopyToProto(actual)
        self.assertEqual(shape(actual), shape(expected))

if __name__ == '__main__':
    unittest.main()
