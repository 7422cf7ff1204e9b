from storefront.cli.main import main

raise SystemExit(main())
