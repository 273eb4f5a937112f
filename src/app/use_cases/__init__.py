"""
Use Cases

Organized into domain folders:
- auth/: Login, current user, password change
- cases/: Cases, stages, key dates
- documents/: Document lifecycle
- messages/, notifications/, activity/: Communication and audit trail
- users/: Organization user administration
- analytics/: Stats, dashboard and reports
- ai/: AI document review
- superadmin/: Platform console
- cron/: Scheduled jobs (demo sweeper, reminder dispatcher)

Import from subdirectories.
"""
