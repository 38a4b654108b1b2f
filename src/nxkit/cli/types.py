from typing import Annotated

from pydantic import Field

NonNegativeInt = Annotated[int, Field(ge=0)]
EncodingName = Annotated[str, Field(min_length=1)]
