class CommunityAppError(Exception):
    """Base class for recoverable request failures.

    Every subclass carries a ``tag`` that callers branch on. The message is
    for humans only.
    """
    tag = "CommunityAppError"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_variant(self) -> dict:
        """Render as a single-entry ``{tag: message}`` mapping."""
        return {self.tag: self.message}


# Invalid input
class CredentialsMissing(CommunityAppError):
    tag = "CredentialsMissing"

class UsernameRequired(CommunityAppError):
    tag = "UsernameRequired"

# Not found
class UserDoesNotExist(CommunityAppError):
    tag = "UserDoesNotExist"

class CommunityDoesNotExist(CommunityAppError):
    tag = "CommunityDoesNotExist"

# Conflict
class UserAlreadyExists(CommunityAppError):
    tag = "UserAlreadyExists"

class CommunityAlreadyExists(CommunityAppError):
    tag = "CommunityAlreadyExists"

class AlreadyAMember(CommunityAppError):
    tag = "AlreadyAMember"

# Authorization
class OnlyOwnerCanDelete(CommunityAppError):
    tag = "OnlyOwnerCanDelete"

# Membership
class NotAMemberOfGroup(CommunityAppError):
    tag = "NotAMemberOfGroup"
