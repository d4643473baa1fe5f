from pbxfiletypes.cli import main

raise SystemExit(main())
