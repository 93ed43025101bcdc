import hmac

import bcrypt

from logging_config import get_logger
from models import ErrorKind, Result, User

logger = get_logger(__name__)

COLUMNS = "Id AS id, Username AS username, Password AS password"
# bcrypt only looks at the first 72 bytes; newer releases refuse anything longer
MAX_PASSWORD_BYTES = 72


def row_to_user(row):
    return User(id=int(row['id']), username=row['username'], password=row['password'])


class UserRepository:
    """
    CRUD and login checks for the Users table.

    With hash_passwords on, the Password column holds a bcrypt hash and
    authenticate() verifies against it. With it off, passwords are stored
    and compared as plain text.
    """

    def __init__(self, db, hash_passwords=True, rounds=12):
        self.db = db
        self.hash_passwords = hash_passwords
        self.rounds = rounds

    def _stored_password(self, password):
        """Raises ValueError when the password cannot be hashed."""
        if not self.hash_passwords:
            return password
        if len(password.encode()) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password is longer than {MAX_PASSWORD_BYTES} bytes")
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self.rounds)).decode()

    def _password_matches(self, password, stored):
        if not self.hash_passwords:
            return hmac.compare_digest(password.encode(), stored.encode())
        try:
            return bcrypt.checkpw(password.encode(), stored.encode())
        except ValueError:
            # not a bcrypt hash (row written in plain-text mode) or password over 72 bytes
            logger.warning("Password could not be checked against the stored hash")
            return False

    # --------- LOGIN ----------
    def authenticate(self, username, password):
        """
        Return the user whose username and password both match exactly.
        The username is compared here rather than in SQL because MySQL's
        default collation ignores case.
        """
        result = self.db.fetch_one(
            f"SELECT {COLUMNS} FROM Users WHERE Username = %s",
            (username,),
            mapper=row_to_user,
            missing=f"Unknown user {username}",
        )
        if not result:
            return result
        user = result.value
        if user.username != username or not self._password_matches(password, user.password):
            logger.info(f"Login rejected for {username}")
            return Result.failure(ErrorKind.NOT_FOUND, "Invalid username or password")
        logger.info(f"User {username} logged in")
        return result

    # --------- CRUD ----------
    def create(self, username, password):
        try:
            stored = self._stored_password(password)
        except ValueError as e:
            logger.warning(f"Rejected password for new user {username}: {e}")
            return Result.failure(ErrorKind.STATEMENT, str(e))
        result = self.db.execute(
            "INSERT INTO Users (Username, Password) VALUES (%s, %s)",
            (username, stored),
            insert=True,
        )
        if result:
            logger.info(f"Created user {username} ({result.value})")
        return result

    def list_all(self):
        return self.db.fetch_all(
            f"SELECT {COLUMNS} FROM Users ORDER BY Id",
            mapper=row_to_user,
        )

    def get_by_id(self, user_id):
        return self.db.fetch_one(
            f"SELECT {COLUMNS} FROM Users WHERE Id = %s",
            (user_id,),
            mapper=row_to_user,
            missing=f"User {user_id} not found",
        )

    def update(self, user_id, username, password):
        try:
            stored = self._stored_password(password)
        except ValueError as e:
            logger.warning(f"Rejected password for user {user_id}: {e}")
            return Result.failure(ErrorKind.STATEMENT, str(e))
        result = self.db.execute(
            "UPDATE Users SET Username = %s, Password = %s WHERE Id = %s",
            (username, stored, user_id),
            missing=f"User {user_id} not found",
        )
        if result:
            logger.info(f"Updated user {user_id}")
        return result

    def delete(self, user_id):
        result = self.db.execute(
            "DELETE FROM Users WHERE Id = %s",
            (user_id,),
            missing=f"User {user_id} not found",
        )
        if result:
            logger.info(f"Deleted user {user_id}")
        return result

    # --------- SETUP ----------
    def count(self):
        return self.db.fetch_one(
            "SELECT COUNT(*) AS total FROM Users",
            mapper=lambda row: int(row['total']),
        )

    def ensure_admin(self, username, password):
        """Create the first login account when the Users table is empty."""
        result = self.count()
        if not result:
            return result
        if result.value > 0:
            return Result.success(None)
        logger.info(f"No users found, creating initial account {username}")
        return self.create(username, password)
