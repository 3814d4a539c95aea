"""
Current registrant resolution.

The registrant is looked up per request from the X-User-Id header and handed
to use cases explicitly. No credentials are checked.
"""

from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends, Header

from src.platform.config.di import Container
from src.platform.exception.exceptions import AuthenticationError
from src.service.registration.app.interface.i_registrant_query_repo import IRegistrantQueryRepo
from src.service.registration.domain.value_object.registrant import Registrant


@inject
async def get_current_registrant(
    x_user_id: Optional[str] = Header(default=None),
    registrant_query_repo: IRegistrantQueryRepo = Depends(
        Provide[Container.registrant_query_repo]
    ),
) -> Registrant:
    if not x_user_id:
        raise AuthenticationError('Not authenticated')

    registrant = await registrant_query_repo.get_by_id(user_id=x_user_id)
    if not registrant:
        raise AuthenticationError('Unknown user')
    return registrant
