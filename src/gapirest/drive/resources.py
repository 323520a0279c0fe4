"""
Drive v3 resource representations.
https://developers.google.com/drive/api/reference/rest/v3

Sizes, versions and the like are int64 so come over the wire as strings,
the *_field() declarations take care of turning those into ints, the RFC 3339
times into datetimes and the thumbnail image into bytes.
Inline objects without any transcoded fields are left as plain dicts.
"""
from dataclasses import dataclass, field
import datetime

from ..resources import (GoogleResourceBase, bytes_field, date_field, int64_field,
                         resource_field, timestamp_field)

@dataclass
class User(GoogleResourceBase):
    """https://developers.google.com/drive/api/reference/rest/v3/User"""
    displayName: str|None = field(default=None)
    emailAddress: str|None = field(default=None)
    kind: str|None = field(default=None)
    me: bool|None = field(default=None)
    permissionId: str|None = field(default=None)
    photoLink: str|None = field(default=None)

    def __str__(self) -> str:
        if self.emailAddress:
            return f"{self.displayName}<{self.emailAddress}>"
        return str(self.displayName)

@dataclass
class StorageQuota(GoogleResourceBase):
    """The user's storage quota limits and usage.  All values are in bytes."""
    limit: int|None = int64_field()
    usage: int|None = int64_field()
    usageInDrive: int|None = int64_field()
    usageInDriveTrash: int|None = int64_field()

@dataclass
class About(GoogleResourceBase):
    """
    https://developers.google.com/drive/api/reference/rest/v3/about
    Information about the user, the user's Drive, and system capabilities.
    """
    appInstalled: bool|None = field(default=None)
    canCreateDrives: bool|None = field(default=None)
    canCreateTeamDrives: bool|None = field(default=None)
    driveThemes: list[dict]|None = field(default=None)
    exportFormats: dict[str, list[str]]|None = field(default=None)
    folderColorPalette: list[str]|None = field(default=None)
    importFormats: dict[str, list[str]]|None = field(default=None)
    kind: str|None = field(default=None)
    maxImportSizes: dict[str, int]|None = int64_field(mapped=True)
    maxUploadSize: int|None = int64_field()
    storageQuota: StorageQuota|None = resource_field(StorageQuota)
    teamDriveThemes: list[dict]|None = field(default=None)
    user: User|None = resource_field(User)

@dataclass
class ContentRestriction(GoogleResourceBase):
    readOnly: bool|None = field(default=None)
    reason: str|None = field(default=None)
    restrictingUser: User|None = resource_field(User)
    restrictionTime: datetime.datetime|None = timestamp_field()
    type: str|None = field(default=None)

@dataclass
class Thumbnail(GoogleResourceBase):
    image: bytes|None = bytes_field()
    mimeType: str|None = field(default=None)

@dataclass
class ContentHints(GoogleResourceBase):
    indexableText: str|None = field(default=None)
    thumbnail: Thumbnail|None = resource_field(Thumbnail)

@dataclass
class VideoMediaMetadata(GoogleResourceBase):
    durationMillis: int|None = int64_field()
    height: int|None = field(default=None)
    width: int|None = field(default=None)

@dataclass
class LabelField(GoogleResourceBase):
    """
    Representation of field, which is a typed key-value pair.
    Only the list matching valueType is populated.
    """
    dateString: list[datetime.date]|None = date_field(repeated=True)
    id: str|None = field(default=None)
    integer: list[int]|None = int64_field(repeated=True)
    kind: str|None = field(default=None)
    selection: list[str]|None = field(default=None)
    text: list[str]|None = field(default=None)
    user: list[User]|None = resource_field(User, repeated=True)
    valueType: str|None = field(default=None)

@dataclass
class Label(GoogleResourceBase):
    """Representation of a label and label fields, fields is keyed by field id."""
    fields: dict[str, LabelField]|None = resource_field(LabelField, mapped=True)
    id: str|None = field(default=None)
    kind: str|None = field(default=None)
    revisionId: str|None = field(default=None)

@dataclass
class LabelInfo(GoogleResourceBase):
    labels: list[Label]|None = resource_field(Label, repeated=True)

@dataclass
class Permission(GoogleResourceBase):
    """https://developers.google.com/drive/api/reference/rest/v3/permissions"""
    allowFileDiscovery: bool|None = field(default=None)
    deleted: bool|None = field(default=None)
    displayName: str|None = field(default=None)
    domain: str|None = field(default=None)
    emailAddress: str|None = field(default=None)
    expirationTime: datetime.datetime|None = timestamp_field()
    id: str|None = field(default=None)
    kind: str|None = field(default=None)
    pendingOwner: bool|None = field(default=None)
    permissionDetails: list[dict]|None = field(default=None)
    photoLink: str|None = field(default=None)
    role: str|None = field(default=None)
    teamDrivePermissionDetails: list[dict]|None = field(default=None)
    type: str|None = field(default=None)
    view: str|None = field(default=None)

    def __bool__(self) -> bool:
        return bool(self.id) or bool(self.role)

    def __str__(self) -> str:
        who = self.emailAddress or self.domain or self.type
        return f"{who}:{self.role}"

@dataclass
class File(GoogleResourceBase):
    """
    https://developers.google.com/drive/api/reference/rest/v3/files
    The metadata for a file.  When creating or updating only populate the
    fields that should change, everything left as None is not sent.
    """
    appProperties: dict[str, str]|None = field(default=None)
    capabilities: dict[str, bool]|None = field(default=None)
    contentHints: ContentHints|None = resource_field(ContentHints)
    contentRestrictions: list[ContentRestriction]|None = resource_field(ContentRestriction, repeated=True)
    copyRequiresWriterPermission: bool|None = field(default=None)
    createdTime: datetime.datetime|None = timestamp_field()
    description: str|None = field(default=None)
    driveId: str|None = field(default=None)
    explicitlyTrashed: bool|None = field(default=None)
    exportLinks: dict[str, str]|None = field(default=None)
    fileExtension: str|None = field(default=None)
    folderColorRgb: str|None = field(default=None)
    fullFileExtension: str|None = field(default=None)
    hasAugmentedPermissions: bool|None = field(default=None)
    hasThumbnail: bool|None = field(default=None)
    headRevisionId: str|None = field(default=None)
    iconLink: str|None = field(default=None)
    id: str|None = field(default=None)
    imageMediaMetadata: dict|None = field(default=None)
    isAppAuthorized: bool|None = field(default=None)
    kind: str|None = field(default=None)
    labelInfo: LabelInfo|None = resource_field(LabelInfo)
    lastModifyingUser: User|None = resource_field(User)
    linkShareMetadata: dict|None = field(default=None)
    mimeType: str|None = field(default=None)
    modifiedByMe: bool|None = field(default=None)
    modifiedByMeTime: datetime.datetime|None = timestamp_field()
    modifiedTime: datetime.datetime|None = timestamp_field()
    name: str|None = field(default=None)
    originalFilename: str|None = field(default=None)
    ownedByMe: bool|None = field(default=None)
    owners: list[User]|None = resource_field(User, repeated=True)
    parents: list[str]|None = field(default=None)
    permissionIds: list[str]|None = field(default=None)
    permissions: list[Permission]|None = resource_field(Permission, repeated=True)
    properties: dict[str, str]|None = field(default=None)
    quotaBytesUsed: int|None = int64_field()
    resourceKey: str|None = field(default=None)
    shared: bool|None = field(default=None)
    sharedWithMeTime: datetime.datetime|None = timestamp_field()
    sharingUser: User|None = resource_field(User)
    shortcutDetails: dict|None = field(default=None)
    size: int|None = int64_field()
    spaces: list[str]|None = field(default=None)
    starred: bool|None = field(default=None)
    teamDriveId: str|None = field(default=None)
    thumbnailLink: str|None = field(default=None)
    thumbnailVersion: int|None = int64_field()
    trashed: bool|None = field(default=None)
    trashedTime: datetime.datetime|None = timestamp_field()
    trashingUser: User|None = resource_field(User)
    version: int|None = int64_field()
    videoMediaMetadata: VideoMediaMetadata|None = resource_field(VideoMediaMetadata)
    viewedByMe: bool|None = field(default=None)
    viewedByMeTime: datetime.datetime|None = timestamp_field()
    viewersCanCopyContent: bool|None = field(default=None)
    webContentLink: str|None = field(default=None)
    webViewLink: str|None = field(default=None)
    writersCanShare: bool|None = field(default=None)

    FOLDER_MIME_TYPE = "application/vnd.google-apps.folder"

    def __bool__(self) -> bool:
        return bool(self.id)

    def __str__(self) -> str:
        if self:
            return f"{self.name}<{self.id}>"
        return "<empty>"

    def is_folder(self) -> bool:
        return self.mimeType == self.FOLDER_MIME_TYPE

@dataclass
class FileList(GoogleResourceBase):
    files: list[File]|None = resource_field(File, repeated=True)
    incompleteSearch: bool|None = field(default=None)
    kind: str|None = field(default=None)
    nextPageToken: str|None = field(default=None)

@dataclass
class Drive(GoogleResourceBase):
    """
    https://developers.google.com/drive/api/reference/rest/v3/drives
    Representation of a shared drive.
    """
    backgroundImageFile: dict|None = field(default=None)
    backgroundImageLink: str|None = field(default=None)
    capabilities: dict[str, bool]|None = field(default=None)
    colorRgb: str|None = field(default=None)
    createdTime: datetime.datetime|None = timestamp_field()
    hidden: bool|None = field(default=None)
    id: str|None = field(default=None)
    kind: str|None = field(default=None)
    name: str|None = field(default=None)
    orgUnitId: str|None = field(default=None)
    restrictions: dict[str, bool]|None = field(default=None)
    themeId: str|None = field(default=None)

    def __str__(self) -> str:
        return f"{self.name}<{self.id}>"

@dataclass
class DriveList(GoogleResourceBase):
    drives: list[Drive]|None = resource_field(Drive, repeated=True)
    kind: str|None = field(default=None)
    nextPageToken: str|None = field(default=None)

@dataclass
class TeamDrive(GoogleResourceBase):
    """Deprecated: use Drive."""
    backgroundImageFile: dict|None = field(default=None)
    backgroundImageLink: str|None = field(default=None)
    capabilities: dict[str, bool]|None = field(default=None)
    colorRgb: str|None = field(default=None)
    createdTime: datetime.datetime|None = timestamp_field()
    id: str|None = field(default=None)
    kind: str|None = field(default=None)
    name: str|None = field(default=None)
    orgUnitId: str|None = field(default=None)
    restrictions: dict[str, bool]|None = field(default=None)
    themeId: str|None = field(default=None)

@dataclass
class TeamDriveList(GoogleResourceBase):
    kind: str|None = field(default=None)
    nextPageToken: str|None = field(default=None)
    teamDrives: list[TeamDrive]|None = resource_field(TeamDrive, repeated=True)

@dataclass
class Change(GoogleResourceBase):
    """A change to a file or shared drive."""
    changeType: str|None = field(default=None)
    drive: Drive|None = resource_field(Drive)
    driveId: str|None = field(default=None)
    file: File|None = resource_field(File)
    fileId: str|None = field(default=None)
    kind: str|None = field(default=None)
    removed: bool|None = field(default=None)
    teamDrive: TeamDrive|None = resource_field(TeamDrive)
    teamDriveId: str|None = field(default=None)
    time: datetime.datetime|None = timestamp_field()
    type: str|None = field(default=None)

@dataclass
class ChangeList(GoogleResourceBase):
    """
    newStartPageToken is only present once the end of the changes has been reached,
    otherwise resubmit nextPageToken for the next page.
    """
    changes: list[Change]|None = resource_field(Change, repeated=True)
    kind: str|None = field(default=None)
    newStartPageToken: str|None = field(default=None)
    nextPageToken: str|None = field(default=None)

@dataclass
class StartPageToken(GoogleResourceBase):
    kind: str|None = field(default=None)
    startPageToken: str|None = field(default=None)

@dataclass
class Channel(GoogleResourceBase):
    """
    A notification channel used to watch for resource changes.
    expiration is milliseconds since the epoch.
    """
    address: str|None = field(default=None)
    expiration: int|None = int64_field()
    id: str|None = field(default=None)
    kind: str|None = field(default=None)
    params: dict[str, str]|None = field(default=None)
    payload: bool|None = field(default=None)
    resourceId: str|None = field(default=None)
    resourceUri: str|None = field(default=None)
    token: str|None = field(default=None)
    type: str|None = field(default=None)

@dataclass
class Reply(GoogleResourceBase):
    """A reply to a comment on a file."""
    action: str|None = field(default=None)
    author: User|None = resource_field(User)
    content: str|None = field(default=None)
    createdTime: datetime.datetime|None = timestamp_field()
    deleted: bool|None = field(default=None)
    htmlContent: str|None = field(default=None)
    id: str|None = field(default=None)
    kind: str|None = field(default=None)
    modifiedTime: datetime.datetime|None = timestamp_field()

@dataclass
class ReplyList(GoogleResourceBase):
    kind: str|None = field(default=None)
    nextPageToken: str|None = field(default=None)
    replies: list[Reply]|None = resource_field(Reply, repeated=True)

@dataclass
class Comment(GoogleResourceBase):
    """A comment on a file."""
    anchor: str|None = field(default=None)
    author: User|None = resource_field(User)
    content: str|None = field(default=None)
    createdTime: datetime.datetime|None = timestamp_field()
    deleted: bool|None = field(default=None)
    htmlContent: str|None = field(default=None)
    id: str|None = field(default=None)
    kind: str|None = field(default=None)
    modifiedTime: datetime.datetime|None = timestamp_field()
    quotedFileContent: dict|None = field(default=None)
    replies: list[Reply]|None = resource_field(Reply, repeated=True)
    resolved: bool|None = field(default=None)

@dataclass
class CommentList(GoogleResourceBase):
    comments: list[Comment]|None = resource_field(Comment, repeated=True)
    kind: str|None = field(default=None)
    nextPageToken: str|None = field(default=None)

@dataclass
class GeneratedIds(GoogleResourceBase):
    ids: list[str]|None = field(default=None)
    kind: str|None = field(default=None)
    space: str|None = field(default=None)

@dataclass
class LabelList(GoogleResourceBase):
    kind: str|None = field(default=None)
    labels: list[Label]|None = resource_field(Label, repeated=True)
    nextPageToken: str|None = field(default=None)

@dataclass
class LabelFieldModification(GoogleResourceBase):
    """
    A modification to a label's field, only one of the set*Values or
    unsetValues should be given.
    """
    fieldId: str|None = field(default=None)
    kind: str|None = field(default=None)
    setDateValues: list[datetime.date]|None = date_field(repeated=True)
    setIntegerValues: list[int]|None = int64_field(repeated=True)
    setSelectionValues: list[str]|None = field(default=None)
    setTextValues: list[str]|None = field(default=None)
    setUserValues: list[str]|None = field(default=None)
    unsetValues: bool|None = field(default=None)

@dataclass
class LabelModification(GoogleResourceBase):
    fieldModifications: list[LabelFieldModification]|None = resource_field(LabelFieldModification, repeated=True)
    kind: str|None = field(default=None)
    labelId: str|None = field(default=None)
    removeLabel: bool|None = field(default=None)

@dataclass
class ModifyLabelsRequest(GoogleResourceBase):
    kind: str|None = field(default=None)
    labelModifications: list[LabelModification]|None = resource_field(LabelModification, repeated=True)

@dataclass
class ModifyLabelsResponse(GoogleResourceBase):
    kind: str|None = field(default=None)
    modifiedLabels: list[Label]|None = resource_field(Label, repeated=True)

@dataclass
class PermissionList(GoogleResourceBase):
    kind: str|None = field(default=None)
    nextPageToken: str|None = field(default=None)
    permissions: list[Permission]|None = resource_field(Permission, repeated=True)

@dataclass
class Revision(GoogleResourceBase):
    """The metadata for a revision to a file."""
    exportLinks: dict[str, str]|None = field(default=None)
    id: str|None = field(default=None)
    keepForever: bool|None = field(default=None)
    kind: str|None = field(default=None)
    lastModifyingUser: User|None = resource_field(User)
    mimeType: str|None = field(default=None)
    modifiedTime: datetime.datetime|None = timestamp_field()
    originalFilename: str|None = field(default=None)
    publishAuto: bool|None = field(default=None)
    published: bool|None = field(default=None)
    publishedLink: str|None = field(default=None)
    publishedOutsideDomain: bool|None = field(default=None)
    size: int|None = int64_field()

@dataclass
class RevisionList(GoogleResourceBase):
    kind: str|None = field(default=None)
    nextPageToken: str|None = field(default=None)
    revisions: list[Revision]|None = resource_field(Revision, repeated=True)
