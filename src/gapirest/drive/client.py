"""
Drive v3 API client.
https://developers.google.com/drive/api/reference/rest/v3

Methods are named after the REST resource and method, e.g. files.list is
filesList().  Ids are positional, in parent to child order, then the request
body if any, and the query options as keywords.
"""
from . import resources
from .options import (ChangesGetStartPageTokenOptions, ChangesListOptions, ChangesWatchOptions,
                      CommentsGetOptions, CommentsListOptions, DrivesCreateOptions, DrivesDeleteOptions,
                      DrivesGetOptions, DrivesListOptions, DrivesUpdateOptions, FilesCopyOptions,
                      FilesCreateOptions, FilesDeleteOptions, FilesEmptyTrashOptions, FilesExportOptions,
                      FilesGenerateIdsOptions, FilesGetOptions, FilesListLabelsOptions, FilesListOptions,
                      FilesUpdateOptions, FilesWatchOptions, PermissionsCreateOptions,
                      PermissionsDeleteOptions, PermissionsGetOptions, PermissionsListOptions,
                      PermissionsUpdateOptions, RepliesGetOptions, RepliesListOptions, RevisionsGetOptions,
                      RevisionsListOptions, TeamdrivesCreateOptions, TeamdrivesGetOptions,
                      TeamdrivesListOptions, TeamdrivesUpdateOptions)
from .resources import (About, Channel, ChangeList, Comment, CommentList, DriveList, File, FileList,
                        GeneratedIds, LabelList, ModifyLabelsRequest, ModifyLabelsResponse, Permission,
                        PermissionList, Reply, ReplyList, Revision, RevisionList, StartPageToken,
                        TeamDrive, TeamDriveList)
from ..client import GoogleApiClientBase, MEDIA, NO_CONTENT, make_body, make_options, path_param

class Drive(GoogleApiClientBase):
    """
    Client for the Drive API.
    Not to be confused with resources.Drive which is a shared drive.
    """
    _BASE_URL = "https://www.googleapis.com/drive/v3/"
    _SCOPES = ["drive"]

    # about

    def aboutGet(self) -> About:
        """Gets information about the user, the user's Drive, and system capabilities."""
        data = self._request("about")
        return About.from_base(data)

    # changes

    def changesGetStartPageToken(self, **opts) -> StartPageToken:
        """opts: driveId, supportsAllDrives, supportsTeamDrives, teamDriveId"""
        options = make_options(ChangesGetStartPageTokenOptions, opts)
        data = self._request("changes/startPageToken", options=options)
        return StartPageToken.from_base(data)

    def changesList(self, pageToken: str, **opts) -> ChangeList:
        """
        Lists the changes for a user or shared drive.
        opts: driveId, includeCorpusRemovals, includeItemsFromAllDrives,
        includeLabels, includePermissionsForView, includeRemoved,
        includeTeamDriveItems, pageSize, restrictToMyDrive, spaces,
        supportsAllDrives, supportsTeamDrives, teamDriveId
        """
        options = make_options(ChangesListOptions, dict(opts, pageToken=pageToken))
        data = self._request("changes", options=options)
        return ChangeList.from_base(data)

    def changesWatch(self, pageToken: str, req: Channel|dict, **opts) -> Channel:
        """Subscribes to changes for a user, opts as changesList()"""
        options = make_options(ChangesWatchOptions, dict(opts, pageToken=pageToken))
        body = make_body(Channel, req)
        data = self._request("changes/watch", "POST", options=options, body=body)
        return Channel.from_base(data)

    # channels

    def channelsStop(self, req: Channel|dict) -> None:
        """Stop watching resources through this channel."""
        body = make_body(Channel, req)
        self._request("channels/stop", "POST", body=body, response=NO_CONTENT)

    # comments

    def commentsCreate(self, fileId: str, req: Comment|dict) -> Comment:
        body = make_body(Comment, req)
        data = self._request(f"files/{path_param(fileId)}/comments", "POST", body=body)
        return Comment.from_base(data)

    def commentsDelete(self, fileId: str, commentId: str) -> None:
        self._request(f"files/{path_param(fileId)}/comments/{path_param(commentId)}", "DELETE",
                      response=NO_CONTENT)

    def commentsGet(self, fileId: str, commentId: str, **opts) -> Comment:
        """opts: includeDeleted"""
        options = make_options(CommentsGetOptions, opts)
        data = self._request(f"files/{path_param(fileId)}/comments/{path_param(commentId)}",
                             options=options)
        return Comment.from_base(data)

    def commentsList(self, fileId: str, **opts) -> CommentList:
        """
        opts: includeDeleted, pageSize, pageToken, startModifiedTime
        startModifiedTime can be a datetime.
        """
        options = make_options(CommentsListOptions, opts)
        data = self._request(f"files/{path_param(fileId)}/comments", options=options)
        return CommentList.from_base(data)

    def commentsUpdate(self, fileId: str, commentId: str, req: Comment|dict) -> Comment:
        body = make_body(Comment, req)
        data = self._request(f"files/{path_param(fileId)}/comments/{path_param(commentId)}", "PATCH",
                             body=body)
        return Comment.from_base(data)

    # drives

    def drivesCreate(self, requestId: str, req: resources.Drive|dict) -> resources.Drive:
        """
        Creates a shared drive.  requestId is an idempotency key, usually a uuid.
        """
        options = make_options(DrivesCreateOptions, {"requestId": requestId})
        body = make_body(resources.Drive, req)
        data = self._request("drives", "POST", options=options, body=body)
        return resources.Drive.from_base(data)

    def drivesDelete(self, driveId: str, **opts) -> None:
        """
        Permanently deletes a shared drive, it must be empty unless
        allowItemDeletion is set by a domain administrator.
        opts: allowItemDeletion, useDomainAdminAccess
        """
        options = make_options(DrivesDeleteOptions, opts)
        self._request(f"drives/{path_param(driveId)}", "DELETE", options=options, response=NO_CONTENT)

    def drivesGet(self, driveId: str, **opts) -> resources.Drive:
        """opts: useDomainAdminAccess"""
        options = make_options(DrivesGetOptions, opts)
        data = self._request(f"drives/{path_param(driveId)}", options=options)
        return resources.Drive.from_base(data)

    def drivesHide(self, driveId: str) -> resources.Drive:
        """Hides a shared drive from the default view."""
        data = self._request(f"drives/{path_param(driveId)}/hide", "POST")
        return resources.Drive.from_base(data)

    def drivesList(self, **opts) -> DriveList:
        """opts: pageSize, pageToken, q, useDomainAdminAccess"""
        options = make_options(DrivesListOptions, opts)
        data = self._request("drives", options=options)
        return DriveList.from_base(data)

    def drivesUnhide(self, driveId: str) -> resources.Drive:
        data = self._request(f"drives/{path_param(driveId)}/unhide", "POST")
        return resources.Drive.from_base(data)

    def drivesUpdate(self, driveId: str, req: resources.Drive|dict, **opts) -> resources.Drive:
        """opts: useDomainAdminAccess"""
        options = make_options(DrivesUpdateOptions, opts)
        body = make_body(resources.Drive, req)
        data = self._request(f"drives/{path_param(driveId)}", "PATCH", options=options, body=body)
        return resources.Drive.from_base(data)

    # files

    def filesCopy(self, fileId: str, req: File|dict, **opts) -> File:
        """
        Creates a copy of a file, req holds the changes to apply to the copy.
        opts: enforceSingleParent, ignoreDefaultVisibility, includeLabels,
        includePermissionsForView, keepRevisionForever, ocrLanguage,
        supportsAllDrives, supportsTeamDrives
        """
        options = make_options(FilesCopyOptions, opts)
        body = make_body(File, req)
        data = self._request(f"files/{path_param(fileId)}/copy", "POST", options=options, body=body)
        return File.from_base(data)

    def filesCreate(self, req: File|dict, **opts) -> File:
        """
        Creates a file's metadata only, e.g. a folder with
        mimeType=File.FOLDER_MIME_TYPE.
        opts: as filesCopy() plus useContentAsIndexableText
        """
        options = make_options(FilesCreateOptions, opts)
        body = make_body(File, req)
        data = self._request("files", "POST", options=options, body=body)
        return File.from_base(data)

    def filesDelete(self, fileId: str, **opts) -> None:
        """
        Permanently deletes a file owned by the user without moving it to the trash.
        opts: enforceSingleParent, supportsAllDrives, supportsTeamDrives
        """
        options = make_options(FilesDeleteOptions, opts)
        self._request(f"files/{path_param(fileId)}", "DELETE", options=options, response=NO_CONTENT)

    def filesEmptyTrash(self, **opts) -> None:
        """Permanently deletes all of the user's trashed files."""
        options = make_options(FilesEmptyTrashOptions, opts)
        self._request("files/trash", "DELETE", options=options, response=NO_CONTENT)

    def filesExport(self, fileId: str, mimeType: str) -> bytes:
        """
        Exports a Google Workspace document to the requested MIME type and
        returns the exported content, limited to 10MB.
        """
        options = make_options(FilesExportOptions, {"mimeType": mimeType})
        return self._request(f"files/{path_param(fileId)}/export", options=options, response=MEDIA)

    def filesGenerateIds(self, **opts) -> GeneratedIds:
        """opts: count, space, type"""
        options = make_options(FilesGenerateIdsOptions, opts)
        data = self._request("files/generateIds", options=options)
        return GeneratedIds.from_base(data)

    def filesGet(self, fileId: str, **opts) -> File:
        """
        Gets a file's metadata by id.
        opts: acknowledgeAbuse, includeLabels, includePermissionsForView,
        supportsAllDrives, supportsTeamDrives
        """
        options = make_options(FilesGetOptions, opts)
        data = self._request(f"files/{path_param(fileId)}", options=options)
        return File.from_base(data)

    def filesList(self, **opts) -> FileList:
        """
        Lists or searches files.
        opts: corpora, corpus, driveId, includeItemsFromAllDrives, includeLabels,
        includePermissionsForView, includeTeamDriveItems, orderBy, pageSize,
        pageToken, q, spaces, supportsAllDrives, supportsTeamDrives, teamDriveId
        """
        options = make_options(FilesListOptions, opts)
        data = self._request("files", options=options)
        return FileList.from_base(data)

    def filesListLabels(self, fileId: str, **opts) -> LabelList:
        """opts: maxResults, pageToken"""
        options = make_options(FilesListLabelsOptions, opts)
        data = self._request(f"files/{path_param(fileId)}/listLabels", options=options)
        return LabelList.from_base(data)

    def filesModifyLabels(self, fileId: str, req: ModifyLabelsRequest|dict) -> ModifyLabelsResponse:
        body = make_body(ModifyLabelsRequest, req)
        data = self._request(f"files/{path_param(fileId)}/modifyLabels", "POST", body=body)
        return ModifyLabelsResponse.from_base(data)

    def filesUpdate(self, fileId: str, req: File|dict, **opts) -> File:
        """
        Updates a file's metadata with patch semantics.
        opts: as filesCreate() plus addParents, removeParents
        """
        options = make_options(FilesUpdateOptions, opts)
        body = make_body(File, req)
        data = self._request(f"files/{path_param(fileId)}", "PATCH", options=options, body=body)
        return File.from_base(data)

    def filesWatch(self, fileId: str, req: Channel|dict, **opts) -> Channel:
        """Subscribes to changes to a file, opts as filesGet()"""
        options = make_options(FilesWatchOptions, opts)
        body = make_body(Channel, req)
        data = self._request(f"files/{path_param(fileId)}/watch", "POST", options=options, body=body)
        return Channel.from_base(data)

    # permissions

    def permissionsCreate(self, fileId: str, req: Permission|dict, **opts) -> Permission:
        """
        Creates a permission for a file or shared drive.
        opts: emailMessage, enforceSingleParent, moveToNewOwnersRoot,
        sendNotificationEmail, supportsAllDrives, supportsTeamDrives,
        transferOwnership, useDomainAdminAccess
        """
        options = make_options(PermissionsCreateOptions, opts)
        body = make_body(Permission, req)
        data = self._request(f"files/{path_param(fileId)}/permissions", "POST", options=options, body=body)
        return Permission.from_base(data)

    def permissionsDelete(self, fileId: str, permissionId: str, **opts) -> None:
        """opts: supportsAllDrives, supportsTeamDrives, useDomainAdminAccess"""
        options = make_options(PermissionsDeleteOptions, opts)
        self._request(f"files/{path_param(fileId)}/permissions/{path_param(permissionId)}", "DELETE",
                      options=options, response=NO_CONTENT)

    def permissionsGet(self, fileId: str, permissionId: str, **opts) -> Permission:
        """opts: supportsAllDrives, supportsTeamDrives, useDomainAdminAccess"""
        options = make_options(PermissionsGetOptions, opts)
        data = self._request(f"files/{path_param(fileId)}/permissions/{path_param(permissionId)}",
                             options=options)
        return Permission.from_base(data)

    def permissionsList(self, fileId: str, **opts) -> PermissionList:
        """
        opts: includePermissionsForView, pageSize, pageToken, supportsAllDrives,
        supportsTeamDrives, useDomainAdminAccess
        """
        options = make_options(PermissionsListOptions, opts)
        data = self._request(f"files/{path_param(fileId)}/permissions", options=options)
        return PermissionList.from_base(data)

    def permissionsUpdate(self, fileId: str, permissionId: str, req: Permission|dict, **opts) -> Permission:
        """
        opts: removeExpiration, supportsAllDrives, supportsTeamDrives,
        transferOwnership, useDomainAdminAccess
        """
        options = make_options(PermissionsUpdateOptions, opts)
        body = make_body(Permission, req)
        data = self._request(f"files/{path_param(fileId)}/permissions/{path_param(permissionId)}", "PATCH",
                             options=options, body=body)
        return Permission.from_base(data)

    # replies

    def _replies_path(self, fileId: str, commentId: str, replyId: str|None = None) -> str:
        path = f"files/{path_param(fileId)}/comments/{path_param(commentId)}/replies"
        if replyId is not None:
            path += f"/{path_param(replyId)}"
        return path

    def repliesCreate(self, fileId: str, commentId: str, req: Reply|dict) -> Reply:
        body = make_body(Reply, req)
        data = self._request(self._replies_path(fileId, commentId), "POST", body=body)
        return Reply.from_base(data)

    def repliesDelete(self, fileId: str, commentId: str, replyId: str) -> None:
        self._request(self._replies_path(fileId, commentId, replyId), "DELETE", response=NO_CONTENT)

    def repliesGet(self, fileId: str, commentId: str, replyId: str, **opts) -> Reply:
        """opts: includeDeleted"""
        options = make_options(RepliesGetOptions, opts)
        data = self._request(self._replies_path(fileId, commentId, replyId), options=options)
        return Reply.from_base(data)

    def repliesList(self, fileId: str, commentId: str, **opts) -> ReplyList:
        """opts: includeDeleted, pageSize, pageToken"""
        options = make_options(RepliesListOptions, opts)
        data = self._request(self._replies_path(fileId, commentId), options=options)
        return ReplyList.from_base(data)

    def repliesUpdate(self, fileId: str, commentId: str, replyId: str, req: Reply|dict) -> Reply:
        body = make_body(Reply, req)
        data = self._request(self._replies_path(fileId, commentId, replyId), "PATCH", body=body)
        return Reply.from_base(data)

    # revisions

    def revisionsDelete(self, fileId: str, revisionId: str) -> None:
        """
        Permanently deletes a file version.  Only revisions of files with
        binary content can be deleted and never the last remaining one.
        """
        self._request(f"files/{path_param(fileId)}/revisions/{path_param(revisionId)}", "DELETE",
                      response=NO_CONTENT)

    def revisionsGet(self, fileId: str, revisionId: str, **opts) -> Revision:
        """opts: acknowledgeAbuse"""
        options = make_options(RevisionsGetOptions, opts)
        data = self._request(f"files/{path_param(fileId)}/revisions/{path_param(revisionId)}",
                             options=options)
        return Revision.from_base(data)

    def revisionsList(self, fileId: str, **opts) -> RevisionList:
        """opts: pageSize, pageToken"""
        options = make_options(RevisionsListOptions, opts)
        data = self._request(f"files/{path_param(fileId)}/revisions", options=options)
        return RevisionList.from_base(data)

    def revisionsUpdate(self, fileId: str, revisionId: str, req: Revision|dict) -> Revision:
        body = make_body(Revision, req)
        data = self._request(f"files/{path_param(fileId)}/revisions/{path_param(revisionId)}", "PATCH",
                             body=body)
        return Revision.from_base(data)

    # teamdrives, deprecated in favour of drives

    def teamdrivesCreate(self, requestId: str, req: TeamDrive|dict) -> TeamDrive:
        options = make_options(TeamdrivesCreateOptions, {"requestId": requestId})
        body = make_body(TeamDrive, req)
        data = self._request("teamdrives", "POST", options=options, body=body)
        return TeamDrive.from_base(data)

    def teamdrivesDelete(self, teamDriveId: str) -> None:
        self._request(f"teamdrives/{path_param(teamDriveId)}", "DELETE", response=NO_CONTENT)

    def teamdrivesGet(self, teamDriveId: str, **opts) -> TeamDrive:
        """opts: useDomainAdminAccess"""
        options = make_options(TeamdrivesGetOptions, opts)
        data = self._request(f"teamdrives/{path_param(teamDriveId)}", options=options)
        return TeamDrive.from_base(data)

    def teamdrivesList(self, **opts) -> TeamDriveList:
        """opts: pageSize, pageToken, q, useDomainAdminAccess"""
        options = make_options(TeamdrivesListOptions, opts)
        data = self._request("teamdrives", options=options)
        return TeamDriveList.from_base(data)

    def teamdrivesUpdate(self, teamDriveId: str, req: TeamDrive|dict, **opts) -> TeamDrive:
        """opts: useDomainAdminAccess"""
        options = make_options(TeamdrivesUpdateOptions, opts)
        body = make_body(TeamDrive, req)
        data = self._request(f"teamdrives/{path_param(teamDriveId)}", "PATCH", options=options, body=body)
        return TeamDrive.from_base(data)
