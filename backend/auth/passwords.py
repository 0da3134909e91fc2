from werkzeug.security import check_password_hash, generate_password_hash

# Checked against when no account matches, so unknown emails cost a full hash.
_DUMMY_HASH = generate_password_hash('not-a-real-password')


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(hashed_password: str | None, password: str) -> bool:
    if not hashed_password:
        check_password_hash(_DUMMY_HASH, password)
        return False
    return check_password_hash(hashed_password, password)
