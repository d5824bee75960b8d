import logging


def configure_logging(level=logging.INFO, force=False):
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )


def parse_bearer_token(header):
    # ? EXTRAE EL TOKEN DE UN HEADER "Authorization: Bearer <token>"
    if not header:
        return None
    scheme, _, token = header.strip().partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
