import unittest
from unittest import mock
from typer.testing import CliRunner
from communitychat.client import cli
from communitychat.proto import community_pb2

class TestCLI(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        self.calls = []

    def fake_rpc(self, response):
        async def call_rpc(conn, rpc, request):
            self.calls.append((conn, rpc, request))
            return response
        return mock.patch.object(cli, "call_rpc", call_rpc)

    def test_register_sends_caller_and_prints_ok(self):
        with self.fake_rpc(community_pb2.TextResult(ok="user with alice has been created successfully")):
            result = self.runner.invoke(cli.app, ["--caller", "alice-p", "register", "alice"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("created successfully", result.output)
        conn, rpc, request = self.calls[0]
        self.assertEqual(conn.caller, "alice-p")
        self.assertEqual(rpc, "RegisterUser")
        self.assertEqual(request, community_pb2.RegisterUserRequest(username="alice"))

    def test_error_exits_non_zero(self):
        err = community_pb2.Error(tag="NotAMemberOfGroup", message="you are not a member of the group")
        with self.fake_rpc(community_pb2.ListMessagesResponse(err=err)):
            result = self.runner.invoke(cli.app, ["messages", "bob", "devs"])
        self.assertEqual(result.exit_code, 1)
        self.assertEqual(self.calls[0][2],
                         community_pb2.ListMessagesRequest(username="bob", groupname="devs"))

    def test_messages_are_formatted(self):
        messages = community_pb2.MessageList(messages=[
            community_pb2.ChatMessage(id="m1", sender="bob-p", message_text="hi", created_at=5)])
        with self.fake_rpc(community_pb2.ListMessagesResponse(ok=messages)):
            result = self.runner.invoke(cli.app, ["messages", "alice", "devs"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("[5] bob-p: hi", result.output)

    def test_communities_listing(self):
        listing = community_pb2.CommunityList(communities=[
            community_pb2.CommunitySummary(name="devs", owner="alice-p")])
        with self.fake_rpc(community_pb2.ListCommunitiesResponse(ok=listing)):
            result = self.runner.invoke(cli.app, ["communities"])
        self.assertIn("devs owner=alice-p", result.output)
        self.assertEqual(self.calls[0][1], "ListCommunities")

if __name__ == '__main__':
    unittest.main()
