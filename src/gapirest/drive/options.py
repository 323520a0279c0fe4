"""
Query options for the Drive v3 operations.
Options without a default are required by the API and are positional
arguments of the client method rather than keyword options.
"""
from dataclasses import dataclass, field
import datetime

from ..resources import GoogleResourceBase, timestamp_field

@dataclass(kw_only=True)
class ChangesGetStartPageTokenOptions(GoogleResourceBase):
    driveId: str|None = field(default=None)
    supportsAllDrives: bool|None = field(default=None)
    supportsTeamDrives: bool|None = field(default=None)
    teamDriveId: str|None = field(default=None)

@dataclass(kw_only=True)
class ChangesListOptions(GoogleResourceBase):
    """
    pageToken is either the nextPageToken of the previous page or a token
    from changesGetStartPageToken()
    """
    driveId: str|None = field(default=None)
    includeCorpusRemovals: bool|None = field(default=None)
    includeItemsFromAllDrives: bool|None = field(default=None)
    includeLabels: str|None = field(default=None)
    includePermissionsForView: str|None = field(default=None)
    includeRemoved: bool|None = field(default=None)
    includeTeamDriveItems: bool|None = field(default=None)
    pageSize: int|None = field(default=None)
    pageToken: str
    restrictToMyDrive: bool|None = field(default=None)
    spaces: str|None = field(default=None)
    supportsAllDrives: bool|None = field(default=None)
    supportsTeamDrives: bool|None = field(default=None)
    teamDriveId: str|None = field(default=None)

@dataclass(kw_only=True)
class ChangesWatchOptions(ChangesListOptions):
    pass

@dataclass(kw_only=True)
class CommentsGetOptions(GoogleResourceBase):
    includeDeleted: bool|None = field(default=None)

@dataclass(kw_only=True)
class CommentsListOptions(GoogleResourceBase):
    includeDeleted: bool|None = field(default=None)
    pageSize: int|None = field(default=None)
    pageToken: str|None = field(default=None)
    startModifiedTime: datetime.datetime|str|None = timestamp_field()

@dataclass(kw_only=True)
class DrivesCreateOptions(GoogleResourceBase):
    # idempotency key, a repeated request with the same id returns 409
    requestId: str

@dataclass(kw_only=True)
class DrivesDeleteOptions(GoogleResourceBase):
    allowItemDeletion: bool|None = field(default=None)
    useDomainAdminAccess: bool|None = field(default=None)

@dataclass(kw_only=True)
class DrivesGetOptions(GoogleResourceBase):
    useDomainAdminAccess: bool|None = field(default=None)

@dataclass(kw_only=True)
class DrivesListOptions(GoogleResourceBase):
    pageSize: int|None = field(default=None)
    pageToken: str|None = field(default=None)
    q: str|None = field(default=None)
    useDomainAdminAccess: bool|None = field(default=None)

@dataclass(kw_only=True)
class DrivesUpdateOptions(GoogleResourceBase):
    useDomainAdminAccess: bool|None = field(default=None)

@dataclass(kw_only=True)
class FilesCopyOptions(GoogleResourceBase):
    enforceSingleParent: bool|None = field(default=None)
    ignoreDefaultVisibility: bool|None = field(default=None)
    includeLabels: str|None = field(default=None)
    includePermissionsForView: str|None = field(default=None)
    keepRevisionForever: bool|None = field(default=None)
    ocrLanguage: str|None = field(default=None)
    supportsAllDrives: bool|None = field(default=None)
    supportsTeamDrives: bool|None = field(default=None)

@dataclass(kw_only=True)
class FilesCreateOptions(FilesCopyOptions):
    useContentAsIndexableText: bool|None = field(default=None)

@dataclass(kw_only=True)
class FilesDeleteOptions(GoogleResourceBase):
    enforceSingleParent: bool|None = field(default=None)
    supportsAllDrives: bool|None = field(default=None)
    supportsTeamDrives: bool|None = field(default=None)

@dataclass(kw_only=True)
class FilesEmptyTrashOptions(GoogleResourceBase):
    enforceSingleParent: bool|None = field(default=None)

@dataclass(kw_only=True)
class FilesExportOptions(GoogleResourceBase):
    mimeType: str

@dataclass(kw_only=True)
class FilesGenerateIdsOptions(GoogleResourceBase):
    count: int|None = field(default=None)
    space: str|None = field(default=None)
    type: str|None = field(default=None)

@dataclass(kw_only=True)
class FilesGetOptions(GoogleResourceBase):
    acknowledgeAbuse: bool|None = field(default=None)
    includeLabels: str|None = field(default=None)
    includePermissionsForView: str|None = field(default=None)
    supportsAllDrives: bool|None = field(default=None)
    supportsTeamDrives: bool|None = field(default=None)

@dataclass(kw_only=True)
class FilesListLabelsOptions(GoogleResourceBase):
    maxResults: int|None = field(default=None)
    pageToken: str|None = field(default=None)

@dataclass(kw_only=True)
class FilesListOptions(GoogleResourceBase):
    """
    q is the Drive search query, e.g. "name contains 'report' and trashed = false"
    corpus is the deprecated form of corpora, 'domain' or 'user'.
    """
    corpora: str|None = field(default=None)
    corpus: str|None = field(default=None)
    driveId: str|None = field(default=None)
    includeItemsFromAllDrives: bool|None = field(default=None)
    includeLabels: str|None = field(default=None)
    includePermissionsForView: str|None = field(default=None)
    includeTeamDriveItems: bool|None = field(default=None)
    orderBy: str|None = field(default=None)
    pageSize: int|None = field(default=None)
    pageToken: str|None = field(default=None)
    q: str|None = field(default=None)
    spaces: str|None = field(default=None)
    supportsAllDrives: bool|None = field(default=None)
    supportsTeamDrives: bool|None = field(default=None)
    teamDriveId: str|None = field(default=None)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.corpus is not None and self.corpus not in ("domain", "user"):
            raise ValueError(f"Invalid corpus: {self.corpus}")

@dataclass(kw_only=True)
class FilesUpdateOptions(FilesCreateOptions):
    # comma separated parent ids
    addParents: str|None = field(default=None)
    removeParents: str|None = field(default=None)

@dataclass(kw_only=True)
class FilesWatchOptions(FilesGetOptions):
    pass

@dataclass(kw_only=True)
class PermissionsCreateOptions(GoogleResourceBase):
    emailMessage: str|None = field(default=None)
    enforceSingleParent: bool|None = field(default=None)
    moveToNewOwnersRoot: bool|None = field(default=None)
    sendNotificationEmail: bool|None = field(default=None)
    supportsAllDrives: bool|None = field(default=None)
    supportsTeamDrives: bool|None = field(default=None)
    transferOwnership: bool|None = field(default=None)
    useDomainAdminAccess: bool|None = field(default=None)

@dataclass(kw_only=True)
class PermissionsDeleteOptions(GoogleResourceBase):
    supportsAllDrives: bool|None = field(default=None)
    supportsTeamDrives: bool|None = field(default=None)
    useDomainAdminAccess: bool|None = field(default=None)

@dataclass(kw_only=True)
class PermissionsGetOptions(PermissionsDeleteOptions):
    pass

@dataclass(kw_only=True)
class PermissionsListOptions(GoogleResourceBase):
    includePermissionsForView: str|None = field(default=None)
    pageSize: int|None = field(default=None)
    pageToken: str|None = field(default=None)
    supportsAllDrives: bool|None = field(default=None)
    supportsTeamDrives: bool|None = field(default=None)
    useDomainAdminAccess: bool|None = field(default=None)

@dataclass(kw_only=True)
class PermissionsUpdateOptions(GoogleResourceBase):
    removeExpiration: bool|None = field(default=None)
    supportsAllDrives: bool|None = field(default=None)
    supportsTeamDrives: bool|None = field(default=None)
    transferOwnership: bool|None = field(default=None)
    useDomainAdminAccess: bool|None = field(default=None)

@dataclass(kw_only=True)
class RepliesGetOptions(GoogleResourceBase):
    includeDeleted: bool|None = field(default=None)

@dataclass(kw_only=True)
class RepliesListOptions(GoogleResourceBase):
    includeDeleted: bool|None = field(default=None)
    pageSize: int|None = field(default=None)
    pageToken: str|None = field(default=None)

@dataclass(kw_only=True)
class RevisionsGetOptions(GoogleResourceBase):
    acknowledgeAbuse: bool|None = field(default=None)

@dataclass(kw_only=True)
class RevisionsListOptions(GoogleResourceBase):
    pageSize: int|None = field(default=None)
    pageToken: str|None = field(default=None)

@dataclass(kw_only=True)
class TeamdrivesCreateOptions(GoogleResourceBase):
    requestId: str

@dataclass(kw_only=True)
class TeamdrivesGetOptions(GoogleResourceBase):
    useDomainAdminAccess: bool|None = field(default=None)

@dataclass(kw_only=True)
class TeamdrivesListOptions(GoogleResourceBase):
    pageSize: int|None = field(default=None)
    pageToken: str|None = field(default=None)
    q: str|None = field(default=None)
    useDomainAdminAccess: bool|None = field(default=None)

@dataclass(kw_only=True)
class TeamdrivesUpdateOptions(GoogleResourceBase):
    useDomainAdminAccess: bool|None = field(default=None)
