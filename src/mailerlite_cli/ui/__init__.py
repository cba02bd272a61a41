"""
mailerlite-cli dashboard.

Layers (only ``app`` imports Textual):

  state        messages, ViewType, FocusArea
  keys         key-name table
  components   Table, DetailPanel, sidebar/status/spinner/help chrome
  views        one ResourceView per MailerLite resource
  model        DashboardModel, the root reducer
  app          DashboardApp, the Textual shell that runs the model
"""
