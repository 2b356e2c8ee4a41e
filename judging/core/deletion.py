from enum import Enum
from typing import List, Tuple

from sqlalchemy.orm import Query, Session

from judging.core.errors import DependentRowsExist


class DeletePolicy(str, Enum):
    RESTRICT = "restrict"
    CASCADE = "cascade"
    STORE = "store"


def delete_with_policy(db: Session, instance, dependents: List[Tuple[str, Query]], policy: DeletePolicy, label: str):
    """Delete `instance` after applying `policy` to the rows that reference it.

    `dependents` are (name, query) pairs listed in the order they must be
    removed for a cascade, innermost first.

    - restrict: refuse when any dependent query matches a row.
    - cascade: bulk-delete every dependent query, then the instance.
    - store: delete only the instance; the store's foreign keys decide.
    """
    policy = DeletePolicy(policy)

    if policy is DeletePolicy.RESTRICT:
        blocking = [name for name, query in dependents if query.first() is not None]
        if blocking:
            raise DependentRowsExist(f"{label} still has {', '.join(blocking)}")

    elif policy is DeletePolicy.CASCADE:
        for _name, query in dependents:
            query.delete(synchronize_session=False)

    db.delete(instance)
    db.commit()
