"""
Google Drive v3.
gapirest.drive.Drive is the API client, the shared drive resource of the same
name is gapirest.drive.resources.Drive
"""
from . import options, resources
from .client import Drive
from .resources import (About, Change, ChangeList, Channel, Comment, CommentList, ContentHints,
                        ContentRestriction, DriveList, File, FileList, GeneratedIds, Label, LabelField,
                        LabelFieldModification, LabelInfo, LabelList, LabelModification,
                        ModifyLabelsRequest, ModifyLabelsResponse, Permission, PermissionList, Reply,
                        ReplyList, Revision, RevisionList, StartPageToken, StorageQuota, TeamDrive,
                        TeamDriveList, Thumbnail, User, VideoMediaMetadata)
