from commonlib.main import main

raise SystemExit(main())
